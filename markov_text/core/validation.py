def is_valid_window_length(k) -> bool:
    return isinstance(k, int) and not isinstance(k, bool) and k >= 1

def is_valid_text_length(n) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n >= 0
