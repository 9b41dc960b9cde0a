__title__ = 'optgroup'
__license__ = 'MIT'
__version__ = "0.1.0"

from .coercion import *
from .faults import *
from .index import *
from .model import *
from .parser import *
from .policies import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
))

version_info = VersionInfo(0, 1, 0, "final", 0)

__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the coercion
__all__ += coercion.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the index
__all__ += index.__all__  # type: ignore[attr-defined]
# Load the exposed API of the model
__all__ += model.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser
__all__ += parser.__all__  # type: ignore[attr-defined]
# Load the exposed API of the policies
__all__ += policies.__all__  # type: ignore[attr-defined]
