import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from solver import EquationError, solve_equation

logger = logging.getLogger(__name__)

app = FastAPI(title="Computor API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class EquationRequest(BaseModel):
    equation: str


class RootCheck(BaseModel):
    root: str
    residual: str


class Summary(BaseModel):
    runtime_ms: float
    total_lines: int
    library: str


class SolveResponse(BaseModel):
    equation: str
    reduced_form: str
    degree: int
    discriminant: float | None = None
    kind: str
    solutions: list[str]
    lines: list[str]
    verification: list[RootCheck]
    summary: Summary


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: EquationRequest):
    equation = req.equation.strip().upper()
    if not equation:
        raise HTTPException(status_code=400, detail="Equation cannot be empty.")

    logger.info("solving %r", equation)
    try:
        result = solve_equation(equation)
    except EquationError as e:
        logger.warning("rejected %r: %s", equation, e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("solver failure on %r", equation)
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    return result
