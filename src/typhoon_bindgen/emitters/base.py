"""Emitter base: lower an IDL document, render it, write one SDK package."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from typhoon_bindgen.binding import BindingModule, lower
from typhoon_bindgen.errors import EmitError
from typhoon_bindgen.idl import Document
from typhoon_bindgen.languages import Language, LanguageConfig, get_config, language_config
from typhoon_bindgen.type_mapper import map_type

logger = logging.getLogger(__name__)


@dataclass
class EmittedPackage:
    language: Language
    program_name: str
    root: Path
    files: list[Path] = field(default_factory=list)


class Emitter(ABC):
    """One target language. Subclasses supply file layout and rendering."""

    language: Language

    @property
    def config(self) -> LanguageConfig:
        return language_config(self.language)

    @property
    def package_version(self) -> str:
        return get_config().package_version

    def map_type(self, tag: str) -> str:
        return map_type(tag, self.language)

    def package_name(self, program_name: str) -> str:
        return f"{program_name}-sdk"

    def lower(self, program_name: str, document: Document) -> BindingModule:
        return lower(document, program_name, self.language)

    @abstractmethod
    def client_path(self, program_name: str) -> Path:
        """Client source path, relative to the package root."""

    @abstractmethod
    def types_path(self, program_name: str) -> Path:
        """Generated types path, relative to the package root."""

    @abstractmethod
    def manifest_path(self, program_name: str) -> Path:
        """Dependency manifest path, relative to the package root."""

    @abstractmethod
    def render_client(self, module: BindingModule) -> str: ...

    @abstractmethod
    def render_types(self, module: BindingModule) -> str: ...

    @abstractmethod
    def render_manifest(self, program_name: str) -> str: ...

    def render_extras(self, program_name: str) -> dict[Path, str]:
        """Build config beside the manifest, keyed by relative path."""
        return {}

    def package_root(self, program_name: str, out_dir: Path) -> Path:
        return Path(out_dir) / self.language.value / program_name

    def emit(self, program_name: str, document: Document, out_dir: Path) -> EmittedPackage:
        """Write client, types, manifest and any build config under out_dir/<language>/<program_name>/."""
        module = self.lower(program_name, document)
        root = self.package_root(program_name, out_dir)
        contents = {
            self.client_path(program_name): self.render_client(module),
            self.types_path(program_name): self.render_types(module),
            self.manifest_path(program_name): self.render_manifest(program_name),
            **self.render_extras(program_name),
        }
        package = EmittedPackage(self.language, program_name, root)
        try:
            root.mkdir(parents=True, exist_ok=True)
            for rel, text in contents.items():
                path = root / rel
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(text, encoding="utf-8")
                logger.debug("wrote %s", path)
                package.files.append(path)
        except OSError as e:
            raise EmitError(
                f"failed to write package: {e}",
                program=program_name,
                language=self.language.value,
            ) from e
        return package
