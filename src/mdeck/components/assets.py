from collections.abc import Iterable
from pathlib import Path

from ..exceptions import AssetNotFoundError
from ..splitting import decode_source

static_dir = Path(__file__).parent.parent / "static"


class AssetsLoader:
    def __init__(self, static_dir: Path = static_dir) -> None:
        self._static_dir = static_dir

    @property
    def default_stylesheet(self) -> str:
        return self._read(self._static_dir / "style.css")

    @property
    def runtime_script(self) -> str:
        return self._read(self._static_dir / "runtime.js")

    def load(self, paths: Iterable[Path]) -> list[str]:
        """Read user stylesheets or scripts, keeping their order.

        Raises:
            AssetNotFoundError: Raised if one of the files cannot be read.
        """
        return [self._read(path) for path in paths]

    def read_source(self, path: Path) -> str:
        try:
            raw = path.read_bytes()
        except OSError as e:
            msg = f"cannot read source {path}: {e.strerror}"
            raise AssetNotFoundError(msg) from e
        return decode_source(raw)

    def _read(self, path: Path) -> str:
        try:
            return decode_source(path.read_bytes())
        except OSError as e:
            msg = f"cannot read asset {path}: {e.strerror}"
            raise AssetNotFoundError(msg) from e
