from strided._version import version as __version__
from strided.api import empty, full, zeros
from strided.core.array import (
    Array1D,
    Array2D,
    Array3D,
    Array4D,
    Array5D,
    Array6D,
    Array7D,
    ElementRef,
    StridedArray,
    array_class_for_rank,
)
from strided.core.config import config
from strided.errors import (
    ArrayReleasedError,
    IndexOutOfRangeError,
    InvalidExtentError,
    ReadOnlyElementError,
)


def print_debug_info() -> None:
    """
    Print version info for use in bug reports.
    """
    import platform
    from importlib.metadata import PackageNotFoundError, version

    def print_packages(packages: list[str]) -> None:
        not_installed = []
        for package in packages:
            try:
                print(f"{package}: {version(package)}")
            except PackageNotFoundError:
                not_installed.append(package)
        if not_installed:
            print("\n**Not Installed:**")
            for package in not_installed:
                print(package)

    required = [
        "numpy",
        "donfig",
    ]

    print(f"platform: {platform.platform()}")
    print(f"python: {platform.python_version()}")
    print(f"strided: {__version__}\n")
    print("**Required dependencies:**")
    print_packages(required)


__all__ = [
    "Array1D",
    "Array2D",
    "Array3D",
    "Array4D",
    "Array5D",
    "Array6D",
    "Array7D",
    "ArrayReleasedError",
    "ElementRef",
    "IndexOutOfRangeError",
    "InvalidExtentError",
    "ReadOnlyElementError",
    "StridedArray",
    "__version__",
    "array_class_for_rank",
    "config",
    "empty",
    "full",
    "print_debug_info",
    "zeros",
]
