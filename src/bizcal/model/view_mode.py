# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Literal, TypedDict, Union

import pendulum


class ViewMode(Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class Direction(Enum):
    PREV = "prev"
    NEXT = "next"


# "from" is a keyword, so ranges use the functional TypedDict syntax
DateRange = TypedDict("DateRange", {"from": pendulum.Date, "to": pendulum.Date})


class SingleSelection(TypedDict):
    kind: Literal["single"]
    date: pendulum.Date


RangeSelection = TypedDict(
    "RangeSelection",
    {"kind": Literal["range"], "from": pendulum.Date, "to": pendulum.Date},
)

Selection = Union[SingleSelection, RangeSelection]


def single_selection(date: pendulum.Date) -> SingleSelection:
    return {"kind": "single", "date": date}


def range_selection(date_range: DateRange) -> RangeSelection:
    return {"kind": "range", "from": date_range["from"], "to": date_range["to"]}
