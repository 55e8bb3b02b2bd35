from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from bmsearch.core.logging import setup_logger
from bmsearch.models.errors import SymbolOutOfRangeError
from bmsearch.models.search import SearchResult
from bmsearch.searcher.searcher import ASearcher, BoyerMooreSearcher


class SearchApiInput(BaseModel):
    text: str
    pattern: str
    trace: bool = False     # include every step decision in the response


class ShiftDecisionApiOutput(BaseModel):
    kind: str
    bad_char_shift: Optional[int] = None
    good_suffix_shift: int
    chosen_heuristic: str
    shift_amount: int


class StepApiOutput(BaseModel):
    step_number: int
    alignment_offset: int
    next_offset: int
    decision: ShiftDecisionApiOutput


class SearchApiOutput(BaseModel):
    matches: List[int]
    skipped_count: int
    found: bool
    searched: bool
    steps: List[StepApiOutput] = []


app = FastAPI(title="bmsearch", description="Boyer-Moore substring search")
searcher: ASearcher = BoyerMooreSearcher()


@app.on_event("startup")
async def startup():
    setup_logger()


@app.get("/")
async def root():
    return {"message": "bmsearch is running"}


@app.post("/search", response_model=SearchApiOutput)
async def searchText(body: SearchApiInput):
    try:
        result: SearchResult = searcher.search(body.text, body.pattern, record_steps=body.trace)
    except SymbolOutOfRangeError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return SearchApiOutput(
        matches=list(result.matches),
        skipped_count=result.skipped_count,
        found=result.found,
        searched=result.searched,
        steps=[step.to_dict() for step in result.steps],
    )
