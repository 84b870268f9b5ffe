"""Swift SDK: a SwiftPM package built on solana-swift."""

from pathlib import Path

from typhoon_bindgen.binding import BindingModule, program_identifier
from typhoon_bindgen.emitters.base import Emitter
from typhoon_bindgen.emitters.templates import render
from typhoon_bindgen.languages import Language


class SwiftEmitter(Emitter):
    language = Language.SWIFT

    def package_name(self, program_name: str) -> str:
        # SwiftPM targets must be identifiers, so <program>-sdk becomes <Program>SDK.
        return program_identifier(program_name) + "SDK"

    def _sources(self, program_name: str) -> Path:
        return Path("Sources") / self.package_name(program_name)

    def client_path(self, program_name: str) -> Path:
        return self._sources(program_name) / "Client.swift"

    def types_path(self, program_name: str) -> Path:
        return self._sources(program_name) / "Types.swift"

    def manifest_path(self, program_name: str) -> Path:
        return Path("Package.swift")

    def render_client(self, module: BindingModule) -> str:
        return render("swift.client", module=module)

    def render_types(self, module: BindingModule) -> str:
        return render("swift.types", module=module)

    def render_manifest(self, program_name: str) -> str:
        return render(
            "swift.manifest",
            package_name=self.package_name(program_name),
            version=self.package_version,
            dependencies=self.config.dependencies,
        )
