"""Source templates for every target language.

Stored as Jinja2 string constants; emitters pick them from TEMPLATES and fill
them from a BindingModule. Nothing here walks the IDL.
"""

from jinja2 import BaseLoader, Environment, StrictUndefined


def _bool_literal(value: bool) -> str:
    return "true" if value else "false"


_env = Environment(
    loader=BaseLoader(),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
    autoescape=False,
)
_env.filters["bool"] = _bool_literal


def render(name: str, **context) -> str:
    """Render the named template with context."""
    return _env.from_string(TEMPLATES[name]).render(**context)


# ── TypeScript ──────────────────────────────────────────────────────────

TYPESCRIPT_CLIENT = """\
import { PublicKey, TransactionInstruction } from '@solana/web3.js';
{% if module.args_records %}
import { {{ module.args_records | map(attribute='name') | join(', ') }} } from './types';
{% endif %}

export const PROGRAM_ID = new PublicKey('{{ module.program_id }}');

export class {{ module.client_name }} {
  constructor(public readonly programId: PublicKey = PROGRAM_ID) {}
{% for method in module.methods %}

  {{ method.name }}({% for p in method.params %}{{ p.name }}: {{ p.type }}{% if not loop.last %}, {% endif %}{% endfor %}): TransactionInstruction {
    return new TransactionInstruction({
      keys: [
{% for key in method.keys %}
        { pubkey: {{ key.name }}, isSigner: {{ key.is_signer | bool }}, isWritable: {{ key.is_writable | bool }} },
{% endfor %}
      ],
      programId: this.programId,
      // Instruction data encoding is not generated.
      data: Buffer.alloc(0),
    });
  }
{% endfor %}
}
"""

TYPESCRIPT_TYPES = """\
import { PublicKey } from '@solana/web3.js';
{% for record in module.records + module.args_records %}

export interface {{ record.name }} {
{% for f in record.fields %}
  {{ f.name }}: {{ f.type }};
{% endfor %}
}
{% endfor %}
"""

TYPESCRIPT_TSCONFIG = """\
{
  "compilerOptions": {
    "target": "es2020",
    "module": "commonjs",
    "lib": ["es2020"],
    "types": ["node"],
    "outDir": "./lib",
    "rootDir": "./",
    "strict": true,
    "esModuleInterop": true,
    "skipLibCheck": true,
    "forceConsistentCasingInFileNames": true,
    "declaration": true,
    "declarationMap": true,
    "sourceMap": true
  },
  "include": ["**/*.ts"],
  "exclude": ["node_modules", "lib"]
}
"""

# ── Swift ───────────────────────────────────────────────────────────────

SWIFT_CLIENT = """\
import Foundation
import Solana

public let PROGRAM_ID = PublicKey(string: "{{ module.program_id }}")!

public struct {{ module.client_name }} {
    public let programId: PublicKey

    public init(programId: PublicKey = PROGRAM_ID) {
        self.programId = programId
    }
{% for method in module.methods %}

    public func {{ method.name }}({% for p in method.params %}{{ p.name }}: {{ p.type }}{% if not loop.last %}, {% endif %}{% endfor %}) -> TransactionInstruction {
        return TransactionInstruction(
            keys: [
{% for key in method.keys %}
                AccountMeta(publicKey: {{ key.name }}, isSigner: {{ key.is_signer | bool }}, isWritable: {{ key.is_writable | bool }}),
{% endfor %}
            ],
            programId: programId,
            // Instruction data encoding is not generated.
            data: []
        )
    }
{% endfor %}
}
"""

SWIFT_TYPES = """\
import Foundation
import Solana
{% for record in module.records + module.args_records %}

public struct {{ record.name }} {
{% for f in record.fields %}
    public let {{ f.name }}: {{ f.type }}
{% endfor %}

    public init({% for f in record.fields %}{{ f.name }}: {{ f.type }}{% if not loop.last %}, {% endif %}{% endfor %}) {
{% for f in record.fields %}
        self.{{ f.name }} = {{ f.name }}
{% endfor %}
    }
}
{% endfor %}
"""

SWIFT_MANIFEST = """\
// swift-tools-version: 5.7
import PackageDescription

// {{ package_name }} {{ version }}
let package = Package(
    name: "{{ package_name }}",
    platforms: [
        .macOS(.v12),
        .iOS(.v15)
    ],
    products: [
        .library(
            name: "{{ package_name }}",
            targets: ["{{ package_name }}"]
        ),
    ],
    dependencies: [
{% for url, version in dependencies.items() %}
        .package(url: "{{ url }}", from: "{{ version }}"),
{% endfor %}
    ],
    targets: [
        .target(
            name: "{{ package_name }}",
            dependencies: [
                .product(name: "Solana", package: "solana-swift")
            ]
        ),
        .testTarget(
            name: "{{ package_name }}Tests",
            dependencies: ["{{ package_name }}"]
        ),
    ]
)
"""

# ── Kotlin ──────────────────────────────────────────────────────────────

KOTLIN_CLIENT = """\
package {{ package }}

import com.solana.core.AccountMeta
import com.solana.core.PublicKey
import com.solana.core.TransactionInstruction

val PROGRAM_ID = PublicKey("{{ module.program_id }}")

class {{ module.client_name }}(
    private val programId: PublicKey = PROGRAM_ID
) {
{% for method in module.methods %}

    fun {{ method.name }}({% for p in method.params %}{{ p.name }}: {{ p.type }}{% if not loop.last %}, {% endif %}{% endfor %}): TransactionInstruction {
        return TransactionInstruction(
            programId,
            listOf(
{% for key in method.keys %}
                AccountMeta({{ key.name }}, isSigner = {{ key.is_signer | bool }}, isWritable = {{ key.is_writable | bool }}),
{% endfor %}
            ),
            // Instruction data encoding is not generated.
            ByteArray(0)
        )
    }
{% endfor %}
}
"""

KOTLIN_TYPES = """\
package {{ package }}

import com.solana.core.PublicKey
{% for record in module.records + module.args_records %}

{% if record.fields %}
data class {{ record.name }}(
{% for f in record.fields %}
    val {{ f.name }}: {{ f.type }},
{% endfor %}
)
{% else %}
class {{ record.name }}
{% endif %}
{% endfor %}
"""

KOTLIN_MANIFEST = """\
plugins {
    kotlin("jvm") version "1.9.0"
    `maven-publish`
}

group = "{{ package }}"
version = "{{ version }}"

base {
    archivesName.set("{{ package_name }}")
}

repositories {
    mavenCentral()
}

dependencies {
{% for name, version in dependencies.items() %}
    implementation("{{ name }}:{{ version }}")
{% endfor %}
    testImplementation(kotlin("test"))
}

tasks.test {
    useJUnitPlatform()
}
"""

# ── Rust ────────────────────────────────────────────────────────────────

RUST_CLIENT = """\
use solana_sdk::{
    instruction::{AccountMeta, Instruction},
    pubkey::Pubkey,
};

pub mod types;
{% if module.args_records %}
pub use types::{ {{- module.args_records | map(attribute='name') | join(', ') -}} };
{% endif %}

pub const PROGRAM_ID: Pubkey = solana_sdk::pubkey!("{{ module.program_id }}");

pub struct {{ module.client_name }} {
    pub program_id: Pubkey,
}

impl Default for {{ module.client_name }} {
    fn default() -> Self {
        Self::new()
    }
}

#[allow(non_snake_case)]
impl {{ module.client_name }} {
    pub fn new() -> Self {
        Self {
            program_id: PROGRAM_ID,
        }
    }

    pub fn with_program_id(program_id: Pubkey) -> Self {
        Self { program_id }
    }
{% for method in module.methods %}

    pub fn {{ method.name }}(&self{% for p in method.params %}, {{ p.name }}: {{ p.type }}{% endfor %}) -> Instruction {
{% if method.args_type %}
        // Instruction data encoding is not generated.
        let _ = {{ method.args_param }};
{% endif %}
        Instruction {
            program_id: self.program_id,
            accounts: vec![
{% for key in method.keys %}
                AccountMeta { pubkey: {{ key.name }}, is_signer: {{ key.is_signer | bool }}, is_writable: {{ key.is_writable | bool }} },
{% endfor %}
            ],
            data: Vec::new(),
        }
    }
{% endfor %}
}
"""

RUST_TYPES = """\
#![allow(unused_imports)]

use solana_sdk::pubkey::Pubkey;
{% for record in module.records + module.args_records %}

#[allow(non_snake_case)]
#[derive(Debug, Clone)]
pub struct {{ record.name }} {
{% for f in record.fields %}
    pub {{ f.name }}: {{ f.type }},
{% endfor %}
}
{% endfor %}
"""

RUST_MANIFEST = """\
[package]
name = "{{ package_name }}"
version = "{{ version }}"
edition = "2021"

[dependencies]
{% for name, version in dependencies.items() %}
{{ name }} = "{{ version }}"
{% endfor %}
"""

TEMPLATES = {
    "typescript.client": TYPESCRIPT_CLIENT,
    "typescript.types": TYPESCRIPT_TYPES,
    "typescript.tsconfig": TYPESCRIPT_TSCONFIG,
    "swift.client": SWIFT_CLIENT,
    "swift.types": SWIFT_TYPES,
    "swift.manifest": SWIFT_MANIFEST,
    "kotlin.client": KOTLIN_CLIENT,
    "kotlin.types": KOTLIN_TYPES,
    "kotlin.manifest": KOTLIN_MANIFEST,
    "rust.client": RUST_CLIENT,
    "rust.types": RUST_TYPES,
    "rust.manifest": RUST_MANIFEST,
}
