from typing import Literal, Optional

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel, Field, FiniteFloat

from sortlab.Utils import time_sort
from sortlab.config import API_HOST, API_MAX_VALUES, API_PORT
from sortlab.sort_utils import ALGORITHMS, get_algorithm


# --- Pydantic Models for API ---
# These models define the structure of the API's inputs and outputs

class SortRequest(BaseModel):
    values: list[FiniteFloat] = Field(..., description="The numbers to sort.", max_length=API_MAX_VALUES)
    algorithm: Literal["bubble", "shuttle", "quick"] = Field("quick", description="The sort engine to use.")


class SortResponse(BaseModel):
    algorithm: str
    values: list[float]
    passes: int
    comparisons: int
    swaps: int
    elapsed_ms: Optional[float] = None


# Initialize FastAPI App
app = FastAPI(
    title="Sort API",
    description="Sorts lists of numbers with the bubble, shuttle and quick sort engines.",
    version="1.0",
)


@app.get("/algorithms", response_model=list[str])
async def algorithms_endpoint():
    return list(ALGORITHMS)


# Request for sorting a list and returning it with the statistics of the run
# A plain def, so FastAPI runs the sort in its threadpool instead of on the event loop
@app.post("/sort", response_model=SortResponse)
def sort_endpoint(request: SortRequest):
    """
    Sorts the given values with the chosen engine and returns them
    together with the comparisons and swaps it needed.
    """
    values = list(request.values)
    stats = time_sort(get_algorithm(request.algorithm), values)

    response = stats.as_dict()
    response["algorithm"] = request.algorithm
    response["values"] = values
    return response


def serve(host=API_HOST, port=API_PORT):
    print(f"Starting Uvicorn server at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


# --- Run the Server ---
if __name__ == "__main__":
    serve()
