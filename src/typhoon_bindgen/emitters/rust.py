"""Rust SDK: a library crate built on solana-sdk."""

from pathlib import Path

from typhoon_bindgen.binding import BindingModule
from typhoon_bindgen.emitters.base import Emitter
from typhoon_bindgen.emitters.templates import render
from typhoon_bindgen.languages import Language


class RustEmitter(Emitter):
    language = Language.RUST

    def client_path(self, program_name: str) -> Path:
        return Path("src", "lib.rs")

    def types_path(self, program_name: str) -> Path:
        return Path("src", "types.rs")

    def manifest_path(self, program_name: str) -> Path:
        return Path("Cargo.toml")

    def render_client(self, module: BindingModule) -> str:
        return render("rust.client", module=module)

    def render_types(self, module: BindingModule) -> str:
        return render("rust.types", module=module)

    def render_manifest(self, program_name: str) -> str:
        return render(
            "rust.manifest",
            package_name=self.package_name(program_name),
            version=self.package_version,
            dependencies=self.config.dependencies,
        )

    def package_name(self, program_name: str) -> str:
        # Cargo package names may not start with a digit.
        name = super().package_name(program_name)
        return "_" + name if name[:1].isdigit() else name
