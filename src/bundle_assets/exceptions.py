"""Exception types raised by the asset resolution library.

Every error derives from AssetsError and from the closest builtin
exception, so callers can catch either the library-specific class or
the familiar builtin (e.g. FileNotFoundError, LookupError).
"""


class AssetsError(Exception):
    """Base class for all asset resolution errors."""


class AssetNotFoundError(AssetsError, FileNotFoundError):
    """A manifest file or asset could not be found.

    Attributes:
        path: The path or stream URI that could not be resolved
        declaration_source: Optional "<manifest> [<bundle>]" string
            identifying where the missing asset was referenced
    """

    def __init__(self, message: str, path: str | None = None, declaration_source: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.declaration_source = declaration_source

    def __str__(self) -> str:
        return self.message


class ManifestJsonError(AssetsError, ValueError):
    """A manifest file does not contain a valid JSON document.

    Attributes:
        path: Path of the offending manifest
        msg: Parser error message
        lineno: Line of the syntax error (1-based), if known
        colno: Column of the syntax error (1-based), if known
    """

    def __init__(
        self,
        message: str,
        path: str,
        msg: str = "",
        lineno: int | None = None,
        colno: int | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.msg = msg
        self.lineno = lineno
        self.colno = colno


class InvalidBundlesFileError(AssetsError, ValueError):
    """A manifest is valid JSON but describes bundles incorrectly.

    Attributes:
        path: Path of the offending manifest
        bundle_name: Bundle whose definition is wrong (None for the document itself)
        field: Offending field ('styles', 'scripts', ...), if any
        expected: Description of the expected type
        actual: Name of the type actually found
    """

    def __init__(
        self,
        message: str,
        path: str,
        bundle_name: str | None = None,
        field: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.bundle_name = bundle_name
        self.field = field
        self.expected = expected
        self.actual = actual


class OutOfRangeError(AssetsError, LookupError):
    """A lookup missed in otherwise successfully loaded data."""

    def __str__(self) -> str:
        # LookupError.__str__ would repr() a KeyError-style argument
        return str(self.args[0]) if self.args else ""


class BundleNotFoundError(OutOfRangeError):
    """The requested bundle name is not defined.

    Attributes:
        bundle_name: Name of the missing bundle
    """

    def __init__(self, message: str, bundle_name: str):
        super().__init__(message)
        self.bundle_name = bundle_name


class InvalidArgumentError(AssetsError, ValueError):
    """A caller passed a malformed or contradictory argument."""


class InvalidStreamPathError(InvalidArgumentError):
    """A stream path is neither 'scheme://path' nor a (scheme, path) pair."""


class ConfigurationError(AssetsError):
    """Manifest configuration cannot be honoured."""


class BundleCollisionError(ConfigurationError):
    """A bundle was redefined while its collision policy is 'error'.

    Attributes:
        bundle_name: Name of the redefined bundle
        declaration_source: Where the second definition came from
    """

    def __init__(self, message: str, bundle_name: str, declaration_source: str | None = None):
        super().__init__(message)
        self.bundle_name = bundle_name
        self.declaration_source = declaration_source
