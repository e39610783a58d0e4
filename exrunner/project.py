"""Generation of a rust-project.json file so an editor can analyse the exercises."""

from __future__ import annotations

import json
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One stand-alone crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets the analyser look inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class AnalyzerProject:
    """The contents of rust-project.json and the means to build them."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialise the project compactly, as the analyser expects it."""
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | Path = "./rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_bytes(self.to_json().encode("utf-8"))

    def _add_path(self, path: str) -> None:
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | Path = "exercises") -> None:
        """Add a crate for every .rs file found below root."""
        for entry in sorted(Path(root).glob("**/*"), key=lambda p: p.parts):
            self._add_path(str(entry))

    def get_sysroot_src(self) -> None:
        """Ask rustc for the default toolchain and point at its library sources."""
        proc = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = (proc.stdout or b"").decode("utf-8", "replace")
        words = output.split()
        toolchain = words[0] if words else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )