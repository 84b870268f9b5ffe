"""Generate SDK packages for every (IDL document, language) pair."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from typhoon_bindgen.emitters import EmittedPackage, get_emitter
from typhoon_bindgen.errors import BindgenError, UnsupportedLanguageError
from typhoon_bindgen.idl import discover_idls, load_idl
from typhoon_bindgen.languages import Language, parse_language

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, Language], None]


@dataclass
class Failure:
    program: str
    language: str
    reason: str


@dataclass
class Summary:
    programs: list[str] = field(default_factory=list)
    languages: list[Language] = field(default_factory=list)
    packages: list[EmittedPackage] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)
    skipped_languages: list[str] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 0 if self.packages else 1


def resolve_languages(names: list[str], summary: Summary) -> list[Language]:
    """Known languages in request order; unknown names are recorded and logged."""
    resolved: list[Language] = []
    for name in names:
        try:
            language = parse_language(name)
        except UnsupportedLanguageError as e:
            logger.warning("%s", e)
            summary.skipped_languages.append(name)
            continue
        if language not in resolved:
            resolved.append(language)
    return resolved


def generate(
    languages: list[str],
    idl_dir: Path,
    out_dir: Path,
    on_progress: Optional[ProgressCallback] = None,
) -> Summary:
    """Emit one package per (program, language). Only a missing input is fatal."""
    idl_files = discover_idls(idl_dir)
    summary = Summary()
    summary.languages = resolve_languages(languages, summary)

    for idl_path in idl_files:
        program = idl_path.stem
        summary.programs.append(program)
        try:
            document = load_idl(idl_path)
        except BindgenError as e:
            logger.warning("skipping %s: %s", program, e)
            for language in summary.languages:
                summary.failures.append(Failure(program, language.value, str(e)))
            continue

        for language in summary.languages:
            if on_progress:
                on_progress(program, language)
            try:
                package = get_emitter(language).emit(program, document, out_dir)
            except BindgenError as e:
                logger.warning("%s", e)
                summary.failures.append(Failure(program, language.value, e.message))
                continue
            summary.packages.append(package)

    return summary
