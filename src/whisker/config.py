"""Whisker configuration.

WhiskerConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from whisker._errors import ConfigError


@dataclass(frozen=True, slots=True)
class WhiskerConfig:
    """Configuration for one site compilation.

    Attributes:
        root: Path to the project root (contains pages/, public/, etc.).
              Always resolved to an absolute path on construction.
        pages_dir: Directory containing the content source tree.
        theme: Layout module wrapped around every page.  A value starting
            with ``.`` or ``/`` is a path, anything else a package name.
        theme_config: Optional path to the layout's configuration module.
        locales: Locales the site is published in.  Empty disables
            locale routing.
        default_locale: Locale used when no exact variant exists.
        search_index: Write per-locale plain-text search indexes.
        production: Production build (search indexes are only written then).
        asset_dir: Output directory for generated assets.
        raw_query: Resource query marking a direct (non-dispatching) import
            of one locale variant.
        router_module: Module providing ``useRouter`` to dispatch modules.
        ssg_module: Module providing the ``withSSG`` helper.

    """

    root: Path = field(default_factory=Path.cwd)
    pages_dir: str = "pages"
    theme: str | None = None
    theme_config: str | None = None
    locales: tuple[str, ...] = ()
    default_locale: str | None = None
    search_index: bool = False
    production: bool = False
    asset_dir: str = "public"
    raw_query: str = "whisker-raw"
    router_module: str = "next/router"
    ssg_module: str = "whisker/ssg"

    def __post_init__(self) -> None:
        # Resolve root (symlinks included) so that resolved resource paths
        # handed in by the host compare equal to paths found under pages/.
        object.__setattr__(self, "root", Path(self.root).resolve())
        if not isinstance(self.locales, tuple):
            object.__setattr__(self, "locales", tuple(self.locales))
        if self.default_locale and self.locales and self.default_locale not in self.locales:
            msg = (
                f"default_locale {self.default_locale!r} is not one of "
                f"the configured locales {list(self.locales)}"
            )
            raise ConfigError(msg)

    @property
    def pages_path(self) -> Path:
        """Absolute path to the content source tree."""
        return self.root / self.pages_dir

    @property
    def asset_path(self) -> Path:
        """Absolute path to the generated asset directory."""
        return self.root / self.asset_dir

    @property
    def i18n(self) -> bool:
        """Whether locale routing is enabled."""
        return bool(self.locales)
