"""Base class for URI scheme handlers."""

from __future__ import annotations

from .uri import URI


class URIScheme:
    """Validator for one URI scheme.

    Subclasses set the capability flags and implement do_validate. Handlers
    hold no per-call state, so a single instance can serve every URI.
    """

    name: str = ""

    # Port dropped from the URI when it matches, since it is implied
    default_port: int | None = None

    # Whether a URI of this scheme can be followed or fetched by a browser
    browsable: bool = False

    # Whether the scheme uses the hierarchical "//authority/path" form
    hierarchical: bool = False

    # Whether URIs of this scheme are valid with no host at all
    may_omit_host: bool = False

    def validate(self, uri: URI) -> bool:
        """Run the generic checks, then the scheme-specific ones.

        Mutates uri in place. Returns False if the URI must be rejected.
        """
        if self.default_port is not None and uri.port == self.default_port:
            uri.port = None

        if not self.may_omit_host and not uri.host:
            return False

        return self.do_validate(uri)

    def do_validate(self, uri: URI) -> bool:
        raise NotImplementedError

    def capabilities(self) -> dict:
        """Build a dictionary of the capability flags for display."""
        return {
            "name": self.name,
            "default_port": self.default_port,
            "browsable": self.browsable,
            "hierarchical": self.hierarchical,
            "may_omit_host": self.may_omit_host,
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
