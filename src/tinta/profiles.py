"""Per-language lexical profiles.

A LexicalProfile is plain immutable data: which quote characters open
strings, whether numbers and character literals are recognized, the comment
delimiters, and three word lists. The scanner never branches on the language
itself, only on the profile.

Thread Safety:
Profiles are frozen and module-level; safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from tinta.categories import HighlightCategory
from tinta.language import Language

WordEntry = tuple[str, HighlightCategory]


@dataclass(frozen=True, slots=True)
class LexicalProfile:
    """Lexical rules for one language.

    Attributes:
        language: Language this profile describes
        string_quotes: Characters that open and close string literals
        number: Recognize numeric literals
        character: Recognize 'x' and '\\x' character literals
        line_comment: Leader that comments out the rest of the line
        block_comment: (start, end) delimiters of block comments
        keywords: Words highlighted as KEYWORD
        control_statements: Words highlighted as STATEMENT
        builtin_types: Words highlighted as TYPE
        words: Ordered (word, category) table, keywords first, then
            statements, then types. Derived; first match wins.

    """

    language: Language
    string_quotes: frozenset[str] = frozenset()
    number: bool = False
    character: bool = False
    line_comment: str | None = None
    block_comment: tuple[str, str] | None = None
    keywords: tuple[str, ...] = ()
    control_statements: tuple[str, ...] = ()
    builtin_types: tuple[str, ...] = ()
    words: tuple[WordEntry, ...] = field(init=False, repr=False, compare=False)
    _words_by_initial: dict[str, tuple[WordEntry, ...]] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        words = (
            *((w, HighlightCategory.KEYWORD) for w in self.keywords),
            *((w, HighlightCategory.STATEMENT) for w in self.control_statements),
            *((w, HighlightCategory.TYPE) for w in self.builtin_types),
        )
        by_initial: dict[str, list[WordEntry]] = {}
        for entry in words:
            by_initial.setdefault(entry[0][0], []).append(entry)
        # Frozen dataclass: derived fields are written once here
        object.__setattr__(self, "words", words)
        object.__setattr__(
            self,
            "_words_by_initial",
            {initial: tuple(entries) for initial, entries in by_initial.items()},
        )

    def candidates(self, initial: str) -> tuple[WordEntry, ...]:
        """Word table entries starting with ``initial``, in table order."""
        return self._words_by_initial.get(initial, ())


PLAIN_PROFILE = LexicalProfile(language=Language.PLAIN)

C_PROFILE = LexicalProfile(
    language=Language.C,
    string_quotes=frozenset('"'),
    number=True,
    character=True,
    line_comment="//",
    block_comment=("/*", "*/"),
    keywords=(
        "auto", "const", "enum", "extern", "inline", "register", "restrict", "sizeof",
        "static", "struct", "typedef", "union", "volatile",
    ),
    control_statements=(
        "break", "case", "continue", "default", "do", "else", "for", "goto", "if",
        "return", "switch", "while",
    ),
    builtin_types=(
        "char", "double", "float", "int", "long", "short", "signed", "unsigned", "void",
    ),
)

RUST_PROFILE = LexicalProfile(
    language=Language.RUST,
    string_quotes=frozenset('"'),
    number=True,
    character=True,
    line_comment="//",
    block_comment=("/*", "*/"),
    keywords=(
        "as", "const", "crate", "dyn", "enum", "extern", "false", "fn", "impl", "let",
        "mod", "move", "mut", "pub", "ref", "Self", "self", "static", "struct", "super",
        "trait", "true", "type", "unsafe", "use", "where",
    ),
    control_statements=(
        "break", "continue", "else", "for", "if", "in", "loop", "match", "return",
        "while",
    ),
    builtin_types=(
        "i8", "i16", "i32", "i64", "i128", "isize", "u8", "u16", "u32", "u64", "u128",
        "usize", "f32", "f64", "bool", "char",
    ),
)

JAVASCRIPT_PROFILE = LexicalProfile(
    language=Language.JAVASCRIPT,
    string_quotes=frozenset("\"'"),
    number=True,
    character=False,
    line_comment="//",
    block_comment=("/*", "*/"),
    keywords=(
        "class",
        "const",
        "debugger",
        "delete",
        "export",
        "extends",
        "function",
        "import",
        "in",
        "instanceof",
        "new",
        "super",
        "this",
        "typeof",
        "var",
        "void",
        "with",
        "yield",
    ),
    control_statements=(
        "break", "case", "catch", "continue", "default", "do", "else", "finally", "for",
        "if", "return", "switch", "throw", "try", "while",
    ),
    builtin_types=(
        "Object",
        "Function",
        "Boolean",
        "Symbol",
        "Error",
        "Number",
        "BigInt",
        "Math",
        "Date",
        "String",
        "RegExp",
        "Array",
        "Int8Array",
        "Int16Array",
        "Int32Array",
        "BigInt64Array",
        "Uint8Array",
        "Uint16Array",
        "Uint32Array",
        "BigUint64Array",
        "Float32Array",
        "Float64Array",
        "ArrayBuffer",
        "SharedArrayBuffer",
        "Atomics",
        "DataView",
        "JSON",
        "Promise",
        "Generator",
        "GeneratorFunction",
        "AsyncFunction",
        "Reflect",
        "Proxy",
        "Intl",
        "WebAssembly",
    ),
)

GO_PROFILE = LexicalProfile(
    language=Language.GO,
    string_quotes=frozenset('"'),
    number=True,
    character=True,
    line_comment="//",
    block_comment=("/*", "*/"),
    keywords=(
        "chan",
        "const",
        "defer",
        "func",
        "go",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "struct",
        "type",
        "var",
    ),
    control_statements=(
        "break",
        "case",
        "continue",
        "default",
        "else",
        "fallthrough",
        "for",
        "goto",
        "if",
        "return",
        "select",
        "switch",
    ),
    builtin_types=(
        "bool",
        "byte",
        "complex128",
        "complex64",
        "error",
        "float32",
        "float64",
        "int",
        "int16",
        "int32",
        "int64",
        "int8",
        "rune",
        "string",
        "uint",
        "uint16",
        "uint32",
        "uint64",
        "uint8",
        "uintptr",
    ),
)

_PROFILES: dict[Language, LexicalProfile] = {
    Language.PLAIN: PLAIN_PROFILE,
    Language.C: C_PROFILE,
    Language.RUST: RUST_PROFILE,
    Language.JAVASCRIPT: JAVASCRIPT_PROFILE,
    Language.GO: GO_PROFILE,
}


def profile_for(language: Language) -> LexicalProfile:
    """Return the lexical profile of a language.

    Total over Language; languages without syntax rules get PLAIN_PROFILE.
    """
    return _PROFILES.get(language, PLAIN_PROFILE)


__all__ = [
    "C_PROFILE",
    "GO_PROFILE",
    "JAVASCRIPT_PROFILE",
    "PLAIN_PROFILE",
    "RUST_PROFILE",
    "LexicalProfile",
    "profile_for",
]
