"""TypeScript SDK: index.ts, types.ts, package.json and tsconfig.json for @solana/web3.js."""

import json
from pathlib import Path

from typhoon_bindgen.binding import BindingModule
from typhoon_bindgen.emitters.base import Emitter
from typhoon_bindgen.emitters.templates import render
from typhoon_bindgen.languages import Language


class TypeScriptEmitter(Emitter):
    language = Language.TYPESCRIPT

    def client_path(self, program_name: str) -> Path:
        return Path("index.ts")

    def types_path(self, program_name: str) -> Path:
        return Path("types.ts")

    def manifest_path(self, program_name: str) -> Path:
        return Path("package.json")

    def render_client(self, module: BindingModule) -> str:
        return render("typescript.client", module=module)

    def render_types(self, module: BindingModule) -> str:
        return render("typescript.types", module=module)

    def render_manifest(self, program_name: str) -> str:
        manifest = {
            "name": self.package_name(program_name),
            "version": self.package_version,
            "description": f"TypeScript SDK for {program_name} program",
            "main": "lib/index.js",
            "types": "lib/index.d.ts",
            "scripts": {"build": "tsc", "test": "jest"},
            "dependencies": dict(self.config.dependencies),
            "devDependencies": dict(self.config.dev_dependencies),
        }
        return json.dumps(manifest, indent=2) + "\n"

    def render_extras(self, program_name: str) -> dict[Path, str]:
        # "build": "tsc" compiles into lib/, where package.json points main and types.
        return {Path("tsconfig.json"): render("typescript.tsconfig")}
