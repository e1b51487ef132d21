"""Identifier-based fallback route.

Every document stays addressable through this template even when it
has no alias. The generator fills it in and the resolver parses it back,
so the two directions share one compiled object.
"""

import re
from dataclasses import dataclass, field
from urllib.parse import quote, unquote

from seoroute.errors import ConfigurationError
from seoroute.routing.params import CONVERTERS, parse_placeholder

_PLACEHOLDER = re.compile(r"\{[^{}/]*\}")

# Characters a raw request path carries unescaped
PATH_SAFE = "/:@!$&'()*+,;=~"

DEFAULT_TEMPLATE = "/test/{id}/"


@dataclass(frozen=True, slots=True)
class FallbackRoute:
    """A path template with exactly one document-id placeholder.

    Usage::

        route = FallbackRoute("/test/{id}/")
        route.build("non_matching_id_2")   # "/test/non_matching_id_2/"
        route.match("/test/non_matching_id_2/")  # "non_matching_id_2"
    """

    template: str = DEFAULT_TEMPLATE
    param_name: str = field(init=False)
    param_type: str = field(init=False)
    _prefix: str = field(init=False, repr=False)
    _suffix: str = field(init=False, repr=False)
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        template = self.template
        if not template.startswith("/"):
            template = "/" + template
        placeholders = _PLACEHOLDER.findall(template)
        if len(placeholders) != 1:
            msg = (
                f"Fallback route {self.template!r} must contain exactly one "
                f"placeholder such as '{{id}}', found {len(placeholders)}."
            )
            raise ConfigurationError(msg)
        try:
            name, param_type = parse_placeholder(placeholders[0])
        except KeyError:
            msg = (
                f"Fallback route {self.template!r} uses unknown converter "
                f"in {placeholders[0]!r}. Known: {', '.join(sorted(CONVERTERS))}."
            )
            raise ConfigurationError(msg) from None

        prefix, _, suffix = template.partition(placeholders[0])
        pattern, _ = CONVERTERS[param_type]
        object.__setattr__(self, "template", template)
        object.__setattr__(self, "param_name", name or "id")
        object.__setattr__(self, "param_type", param_type)
        object.__setattr__(self, "_prefix", prefix)
        object.__setattr__(self, "_suffix", suffix)
        object.__setattr__(
            self,
            "_regex",
            re.compile(
                f"{re.escape(quote(prefix, safe=PATH_SAFE))}"
                f"(?P<value>{pattern})"
                f"{re.escape(quote(suffix, safe=PATH_SAFE))}"
            ),
        )

    def build(self, document_id: str) -> str:
        """Return the fallback path for *document_id*."""
        return f"{self._prefix}{quote(str(document_id), safe='')}{self._suffix}"

    def match(self, raw_path: str) -> str | None:
        """Return the document id encoded in *raw_path*, or ``None``.

        *raw_path* is the path as sent on the wire, still percent-encoded,
        so an id quoted by ``build`` (``a%2Fb``) stays one segment. Only
        the captured id is decoded. Matching is exact (case-sensitive);
        ids are opaque.
        """
        if not raw_path.startswith("/"):
            raw_path = "/" + raw_path
        found = self._regex.fullmatch(raw_path)
        if found is None:
            return None
        return unquote(found.group("value"))
