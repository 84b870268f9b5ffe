"""Kotlin SDK: a Gradle project built on solana-kotlin."""

from pathlib import Path

from typhoon_bindgen.binding import BindingModule
from typhoon_bindgen.emitters.base import Emitter
from typhoon_bindgen.emitters.templates import render
from typhoon_bindgen.languages import Language, language_config

PACKAGE_PREFIX = "com.typhoon"


def kotlin_package(program_name: str) -> str:
    """com.typhoon.<program>; a segment may not start with a digit or be a keyword."""
    segment = program_name.replace("-", "_")
    if segment[:1].isdigit():
        segment = "_" + segment
    if segment in language_config(Language.KOTLIN).keywords:
        segment += "_"
    return f"{PACKAGE_PREFIX}.{segment}"


class KotlinEmitter(Emitter):
    language = Language.KOTLIN

    def _sources(self, program_name: str) -> Path:
        return Path("src", "main", "kotlin", *kotlin_package(program_name).split("."))

    def client_path(self, program_name: str) -> Path:
        return self._sources(program_name) / "Client.kt"

    def types_path(self, program_name: str) -> Path:
        return self._sources(program_name) / "Types.kt"

    def manifest_path(self, program_name: str) -> Path:
        return Path("build.gradle.kts")

    def render_client(self, module: BindingModule) -> str:
        return render("kotlin.client", module=module, package=kotlin_package(module.program_name))

    def render_types(self, module: BindingModule) -> str:
        return render("kotlin.types", module=module, package=kotlin_package(module.program_name))

    def render_manifest(self, program_name: str) -> str:
        return render(
            "kotlin.manifest",
            package=kotlin_package(program_name),
            package_name=self.package_name(program_name),
            version=self.package_version,
            dependencies=self.config.dependencies,
        )
