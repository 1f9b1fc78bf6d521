def sanitize(text: str, strip_cr: bool = True) -> str:
    return text.replace("\r", "") if strip_cr else text


def read_corpus(path: str, encoding: str = "utf-8", strip_cr: bool = True) -> str:
    # newline="" keeps CRLF as-is; stripping is our decision, not the io layer's
    with open(path, "r", encoding=encoding, newline="") as f:
        return sanitize(f.read(), strip_cr)
