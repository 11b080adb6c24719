from dataclasses import dataclass
from typing import Final

FORMAT_JSON_ARGS: Final[tuple[str, ...]] = ("-format", "json")


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Filters passed to vswhere when searching for installations.

    Values are not validated; vswhere reports malformed input itself.

    Attributes:
        all: Include incomplete instances and ones that may not launch.
        prerelease: Include prerelease instances.
        products: Product IDs to match. `("*",)` matches every installed product.
            Empty means vswhere's default product set.
        requires: Workload/component IDs an instance must have.
        requires_any: Match instances having any of `requires` instead of all.
        version: Version range such as "[15.0,16.0)".
        latest: Return only the newest instance.
        legacy: Also search Visual Studio 2015 and older. These records carry
            far fewer fields.
    """

    all: bool = False
    prerelease: bool = False
    products: tuple[str, ...] = ()
    requires: tuple[str, ...] = ()
    requires_any: bool = False
    version: str = ""
    latest: bool = False
    legacy: bool = False

    def __post_init__(self) -> None:
        # A lone string is one ID, not a sequence of characters.
        for name in ("products", "requires"):
            value = getattr(self, name)
            ids = (value,) if isinstance(value, str) else tuple(value)
            object.__setattr__(self, name, ids)


def build_search_args(options: SearchOptions) -> list[str]:
    """Builds vswhere arguments for a search.

    Args:
        options: Search filters.

    Returns:
        Argument list (without the executable), always ending in `-format json`.
    """
    args: list[str] = []
    if options.all:
        args.append("-all")
    if options.prerelease:
        args.append("-prerelease")
    if options.products:
        args.append("-products")
        args.extend(options.products)
    if options.requires:
        args.append("-requires")
        args.extend(options.requires)
    if options.requires_any:
        args.append("-requiresAny")
    if options.version:
        args.extend(["-version", options.version])
    if options.latest:
        args.append("-latest")
    if options.legacy:
        args.append("-legacy")
    args.extend(FORMAT_JSON_ARGS)
    return args


def build_path_args(path: str) -> list[str]:
    """Builds vswhere arguments that select the instance installed at `path`."""
    return ["-path", path, *FORMAT_JSON_ARGS]
