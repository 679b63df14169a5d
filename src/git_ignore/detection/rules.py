from __future__ import annotations
"""Detector rules: which directory signatures map to which template.

A rule is plain data: a template name and a tuple of predicates. A predicate
checks one directory entry by exact file name, exact file extension (suffix
after the last dot) or exact directory name. Kinds are strict: file
predicates never match directories and directory predicates never match
files, so a directory called `Cargo.toml` does not make a Rust project.

The default table follows starship's language detection data
(`detect_files`, `detect_extensions`, `detect_folders`), restricted to
names that exist as gitignore.io templates. `rules_from_mapping` accepts
that same shape, so a table exported from starship's config schema can be
loaded as is:

    {"rust": {"detect_files": ["Cargo.toml"], "detect_extensions": ["rs"]}}

Several rules may match the same entry; `build.gradle` fires both `java`
and `gradle`.
"""

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence, Tuple

from git_ignore.core.interfaces.fs import DirEntryProtocol


class PredicateKind(enum.Enum):
    FILE_NAME = 'file_name'
    FILE_EXTENSION = 'file_extension'
    DIR_NAME = 'dir_name'


@dataclass(frozen=True)
class Predicate:
    kind: PredicateKind
    value: str

    def matches(self, entry: DirEntryProtocol) -> bool:
        if self.kind is PredicateKind.FILE_NAME:
            return entry.is_file and entry.name == self.value
        if self.kind is PredicateKind.FILE_EXTENSION:
            return entry.is_file and entry.extension == self.value
        return entry.is_dir and entry.name == self.value


def by_file_name(name: str) -> Predicate:
    return Predicate(PredicateKind.FILE_NAME, name)


def by_file_extension(extension: str) -> Predicate:
    return Predicate(PredicateKind.FILE_EXTENSION, extension)


def by_dir_name(name: str) -> Predicate:
    return Predicate(PredicateKind.DIR_NAME, name)


@dataclass(frozen=True)
class DetectorRule:
    template: str
    predicates: Tuple[Predicate, ...]

    def matches(self, entries: Sequence[DirEntryProtocol]) -> bool:
        return any(p.matches(e) for p in self.predicates for e in entries)


def rule(template: str, *, files: Iterable[str] = (), extensions: Iterable[str] = (),
         folders: Iterable[str] = ()) -> DetectorRule:
    predicates = (
        tuple(by_file_name(f) for f in files)
        + tuple(by_file_extension(x) for x in extensions)
        + tuple(by_dir_name(d) for d in folders)
    )
    return DetectorRule(template=template, predicates=predicates)


def rules_from_mapping(raw: Mapping[str, Mapping[str, Any]]) -> Tuple[DetectorRule, ...]:
    """Build a rule table from starship-style `detect_*` data, in mapping order."""
    table = []
    for template, spec in raw.items():
        r = rule(
            template,
            files=spec.get('detect_files') or (),
            extensions=spec.get('detect_extensions') or (),
            folders=spec.get('detect_folders') or (),
        )
        if r.predicates:
            table.append(r)
    return tuple(table)


DEFAULT_RULES: Tuple[DetectorRule, ...] = (
    rule('java', files=('pom.xml', 'build.gradle', 'build.gradle.kts', '.java-version', '.sdkmanrc'),
         extensions=('java', 'class', 'jar')),
    rule('gradle', files=('build.gradle', 'build.gradle.kts', 'settings.gradle', 'settings.gradle.kts', 'gradlew'),
         extensions=('gradle',), folders=('.gradle',)),
    rule('maven', files=('pom.xml', 'mvnw'), folders=('.mvn',)),
    rule('kotlin', extensions=('kt', 'kts')),
    rule('scala', files=('build.sbt', '.scalaenv', '.sbtenv', 'build.sc'), extensions=('scala', 'sbt'),
         folders=('.metals',)),
    rule('sbt', files=('build.sbt', '.sbtopts'), folders=('.bsp',)),
    rule('node', files=('package.json', '.node-version', '.nvmrc'),
         extensions=('js', 'mjs', 'cjs', 'ts', 'mts', 'cts'), folders=('node_modules',)),
    rule('python', files=('requirements.txt', '.python-version', 'pyproject.toml', 'Pipfile', 'tox.ini',
                          'setup.py', '__init__.py'),
         extensions=('py', 'ipynb')),
    rule('haskell', files=('stack.yaml', 'cabal.project'), extensions=('cabal', 'hs')),
    rule('php', files=('composer.json', '.php-version'), extensions=('php',)),
    rule('ruby', files=('Gemfile', '.ruby-version'), extensions=('rb', 'gemspec')),
    rule('rust', files=('Cargo.toml',), extensions=('rs',)),
    rule('go', files=('go.mod', 'go.sum', 'go.work', 'glide.yaml', 'Gopkg.yml', 'Gopkg.lock', '.go-version'),
         extensions=('go',), folders=('Godeps',)),
    rule('dart', files=('pubspec.yaml', 'pubspec.yml', 'pubspec.lock'), extensions=('dart',),
         folders=('.dart_tool',)),
    rule('elixir', files=('mix.exs',)),
    rule('elm', files=('elm.json', 'elm-package.json', '.elm-version'), extensions=('elm',),
         folders=('elm-stuff',)),
    rule('julia', files=('Project.toml', 'Manifest.toml'), extensions=('jl',)),
    rule('lua', files=('.lua-version',), extensions=('lua',)),
    rule('nim', files=('nim.cfg',), extensions=('nim', 'nims', 'nimble')),
    rule('ocaml', files=('dune', 'dune-project', 'jbuild', 'jbuild-ignore', '.merlin'),
         extensions=('opam', 'ml', 'mli', 're', 'rei'), folders=('_opam', 'esy.lock')),
    rule('perl', files=('Makefile.PL', 'Build.PL', 'cpanfile', 'cpanfile.snapshot', 'META.json', 'META.yml',
                        '.perl-version'),
         extensions=('pl', 'pm', 'pod')),
    rule('swift', files=('Package.swift',), extensions=('swift',)),
    rule('terraform', extensions=('tf', 'tfplan', 'tfstate'), folders=('.terraform',)),
    rule('zig', extensions=('zig',)),
    rule('crystal', files=('shard.yml',), extensions=('cr',)),
    rule('erlang', files=('rebar.config', 'erlang.mk')),
)
