"""Per-language emitters, keyed by Language."""

from typhoon_bindgen.emitters.base import EmittedPackage, Emitter
from typhoon_bindgen.emitters.kotlin import KotlinEmitter
from typhoon_bindgen.emitters.rust import RustEmitter
from typhoon_bindgen.emitters.swift import SwiftEmitter
from typhoon_bindgen.emitters.typescript import TypeScriptEmitter
from typhoon_bindgen.languages import Language

EMITTERS: dict[Language, type[Emitter]] = {
    Language.TYPESCRIPT: TypeScriptEmitter,
    Language.SWIFT: SwiftEmitter,
    Language.KOTLIN: KotlinEmitter,
    Language.RUST: RustEmitter,
}


def get_emitter(language: Language) -> Emitter:
    return EMITTERS[language]()


__all__ = [
    "EMITTERS", "EmittedPackage", "Emitter", "get_emitter",
    "KotlinEmitter", "RustEmitter", "SwiftEmitter", "TypeScriptEmitter",
]
