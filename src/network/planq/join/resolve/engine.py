"""Deep-link resolution pipeline.

Runs a raw path and query through the markup guard, the classifier, the
validator for the classified kind and the target resolver. The first
validation failure short-circuits the pipeline and is returned as a
ValidationError outcome.
"""

import logging
from dataclasses import dataclass, field
from typing import Annotated, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from network.planq.join.resolve.charset import ChannelRules
from network.planq.join.resolve.classify import classify, split_request
from network.planq.join.resolve.errors import ErrorKind, InvalidInputException
from network.planq.join.resolve.guard import guard_all
from network.planq.join.resolve.names import load_display_names
from network.planq.join.resolve.target import (
    RedirectToCanonical,
    Success,
    resolve_identifier,
)
from network.planq.join.resolve.validate import validate

logger = logging.getLogger(__name__)

DEFAULT_NATIVE_SCHEME = "status-im"


@dataclass(frozen=True)
class ResolveOptions:
    """
    Read-only inputs shared by every resolution.

    Attributes:
        native_scheme: URI scheme of the native app
        channel_rules: Public channel naming rules
        display_names: Display-name table, the bundled one by default
    """

    native_scheme: str = DEFAULT_NATIVE_SCHEME
    channel_rules: ChannelRules = field(default_factory=ChannelRules)
    display_names: Mapping[str, str] = field(
        default_factory=lambda: load_display_names()
    )


class ValidationError(BaseModel):
    """Input failed validation.

    `detail` and `value` are raw text and may contain markup, they must be
    escaped before being embedded in HTML.
    """

    model_config = ConfigDict(frozen=True)

    outcome: Literal["error"] = "error"
    kind: ErrorKind
    detail: str
    value: str = ""

    @classmethod
    def from_exception(cls, e: InvalidInputException) -> "ValidationError":
        return cls(kind=e.kind, detail=e.detail, value=e.value)


ResolutionOutcome = Annotated[
    Union[Success, RedirectToCanonical, ValidationError],
    Field(discriminator="outcome"),
]


def resolve(
    raw_path_and_query: str, options: Optional[ResolveOptions] = None
) -> Success | RedirectToCanonical | ValidationError:
    """Resolve a deep-link path and query.

    Args:
        raw_path_and_query: Undecoded request path, optionally with a query string
        options: Resolution options, defaults when None

    Returns:
        Success with the target, RedirectToCanonical for case variants of a
        canonical identifier, or ValidationError for the first failure found
    """
    if options is None:
        options = ResolveOptions()

    try:
        request = split_request(raw_path_and_query)
        guard_all(request.decoded_values())
        parsed = classify(request, options.channel_rules)
        logger.debug(
            "Classified %r as %s (%s)", raw_path_and_query, parsed.kind, parsed.encoding
        )
        identifier = validate(parsed, request, options.channel_rules)
    except InvalidInputException as e:
        if e.kind != ErrorKind.contains_markup:
            logger.info("Invalid input %r: %s", raw_path_and_query, e.detail)
        return ValidationError.from_exception(e)

    return resolve_identifier(
        request, identifier, options.native_scheme, options.display_names
    )
