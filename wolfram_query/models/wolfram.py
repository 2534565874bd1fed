"""Schema for the Wolfram|Alpha Full Results API (``/v2/query``, ``output=json``).

Fields use pydantic's strict types so a response with the wrong primitive types
is rejected instead of coerced. Optional keys may be absent but never null; their
None default is not validated. Unknown keys are kept, so a validated payload
dumps back to the structure that was received.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr, field_serializer

# JSON has one number type; timings arrive as 0 as well as 0.25
Number = StrictInt | StrictFloat


class _WolframModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class WolframImage(_WolframModel):
    src: StrictStr
    alt: StrictStr
    title: StrictStr
    width: StrictInt
    height: StrictInt


class WolframSubpod(_WolframModel):
    plaintext: StrictStr = None
    img: WolframImage = None


class WolframPod(_WolframModel):
    title: StrictStr
    scanner: StrictStr
    id: StrictStr
    position: StrictInt
    error: StrictBool = None
    numsubpods: StrictInt
    subpods: list[WolframSubpod]

    @property
    def plaintext(self) -> str | None:
        """Non-empty subpod plaintexts joined by newlines."""
        texts = [s.plaintext for s in self.subpods if s.plaintext]
        return "\n".join(texts) if texts else None


class WolframAssumptionValue(_WolframModel):
    name: StrictStr
    desc: StrictStr
    input: StrictStr


class WolframAssumption(_WolframModel):
    type: StrictStr
    word: StrictStr
    template: StrictStr
    count: StrictInt
    values: list[WolframAssumptionValue]


class WolframQueryResult(_WolframModel):
    success: StrictBool
    error: StrictBool = None
    numpods: StrictInt
    datatypes: StrictStr = None
    timedout: StrictStr = None
    timing: Number
    parsetiming: Number
    pods: list[WolframPod]
    assumptions: list[WolframAssumption] = None

    def ordered_pods(self) -> list[WolframPod]:
        """Pods in display order."""
        return sorted(self.pods, key=lambda p: p.position)


class WolframResponse(_WolframModel):
    queryresult: WolframQueryResult


class QuerySuccess(BaseModel):
    success: Literal[True] = True
    data: WolframResponse

    @field_serializer("data")
    def _dump_received_keys(self, data: WolframResponse) -> dict:
        return data.model_dump(exclude_unset=True)


class QueryFailure(BaseModel):
    success: Literal[False] = False
    error: str


QueryOutcome = QuerySuccess | QueryFailure
