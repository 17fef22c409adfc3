"""
Actions accepted by the session reducer.

Actions form a tagged union discriminated by ``type`` so the same
models validate JSON bodies coming from the HTTP shell:

    >>> from pydantic import TypeAdapter
    >>> TypeAdapter(SessionAction).validate_python({"type": "complete_set"})
    CompleteSet(type='complete_set')
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class _Action(BaseModel):
    model_config = {"frozen": True}


class SkipWarmup(_Action):
    type: Literal["skip_warmup"] = "skip_warmup"


class CompleteSet(_Action):
    type: Literal["complete_set"] = "complete_set"


class RestComplete(_Action):
    """Fired by the rest timer when the countdown reaches zero."""

    type: Literal["rest_complete"] = "rest_complete"


class SkipRest(_Action):
    type: Literal["skip_rest"] = "skip_rest"


class NavigateBack(_Action):
    type: Literal["navigate_back"] = "navigate_back"


class NavigateNext(_Action):
    """Swipe forward: skip warmup, or skip the current exercise."""

    type: Literal["navigate_next"] = "navigate_next"


class CompleteSession(_Action):
    """Internal. Applied by the reducer once the sequence is exhausted."""

    type: Literal["complete_session"] = "complete_session"


SessionAction = Annotated[
    Union[
        SkipWarmup,
        CompleteSet,
        RestComplete,
        SkipRest,
        NavigateBack,
        NavigateNext,
        CompleteSession,
    ],
    Field(discriminator="type"),
]

# Actions a user (or timer) may dispatch. CompleteSession is excluded.
UserAction = Annotated[
    Union[
        SkipWarmup,
        CompleteSet,
        RestComplete,
        SkipRest,
        NavigateBack,
        NavigateNext,
    ],
    Field(discriminator="type"),
]
