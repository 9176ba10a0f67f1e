__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'denoflags'
__author__ = 'the deno authors'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .catalog import *
from .engine import *
from .faults import *
from .flags import *
from .invocation import *
from .parser import *
from .passthrough import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of each layer
__all__ += catalog.__all__  # type: ignore[attr-defined]
__all__ += engine.__all__  # type: ignore[attr-defined]
__all__ += faults.__all__  # type: ignore[attr-defined]
__all__ += flags.__all__  # type: ignore[attr-defined]
__all__ += invocation.__all__  # type: ignore[attr-defined]
__all__ += parser.__all__  # type: ignore[attr-defined]
__all__ += passthrough.__all__  # type: ignore[attr-defined]
