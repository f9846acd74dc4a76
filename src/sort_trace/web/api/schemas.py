from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_by_name=True)


class CompareStep(CamelModel):
    type: Literal["COMPARE"] = "COMPARE"
    i: int
    j: int


class SwapStep(CamelModel):
    type: Literal["SWAP"] = "SWAP"
    i: int
    j: int


class SetStep(CamelModel):
    type: Literal["SET"] = "SET"
    index: int
    value: int


class DoneStep(CamelModel):
    type: Literal["DONE"] = "DONE"


Step = Annotated[Union[CompareStep, SwapStep, SetStep, DoneStep], Field(discriminator="type")]


class RunResponse(CamelModel):
    algorithm_key: str = Field(..., alias="algorithmKey")
    algorithm_name: str = Field(..., alias="algorithmName")
    initial: List[int]
    sorted: List[int]
    steps: List[Step]


class AlgorithmInfo(CamelModel):
    key: str
    name: str


class AlgorithmListResponse(CamelModel):
    algorithms: List[AlgorithmInfo]


class ErrorResponse(CamelModel):
    error: str
