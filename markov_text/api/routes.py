from fastapi import APIRouter, Depends, HTTPException, Header
from fastapi.responses import PlainTextResponse

from markov_text.analytics.markov import LanguageModel
from markov_text.analytics.sampling import EmptyModelError
from markov_text.api.schemas import GenerateIn, GenerateOut, StatsOut
from markov_text.config import settings
from markov_text.services import generate_text, get_model, get_stats

router = APIRouter()


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")

def _model() -> LanguageModel:
    lm = get_model()
    if lm is None:
        raise HTTPException(503, detail="no model loaded")
    return lm

@router.post('/generate', response_model=GenerateOut)
async def generate(data: GenerateIn, lm: LanguageModel = Depends(_model), ok=Depends(_auth)):
    try:
        text = generate_text(lm, data.initial_text, data.text_length, seed=data.seed)
    except EmptyModelError as e:
        raise HTTPException(422, detail=str(e))
    return {'text': text, 'length': len(text)}

@router.get('/stats', response_model=StatsOut)
async def stats(lm: LanguageModel = Depends(_model), ok=Depends(_auth)):
    return get_stats(lm)

@router.get('/model', response_class=PlainTextResponse)
async def model_dump(lm: LanguageModel = Depends(_model), ok=Depends(_auth)):
    return str(lm)
