"""C and its relatives.

C, C++, C#, Java, JavaScript, Ferite and Haxe all share one 20-slot table
and one renderer binding, built by ``c_like``. D has its own table.
"""

from ..core.catalog import (
    FlagSetting,
    KeywordClass,
    LanguageCatalog,
    bindings,
    keyword_bindings,
    slots,
    style,
)
from ..core.filetypes import Filetype
from ..core.renderer import STYLE_DEFAULT

# Shared generic defaults
DEFAULT = style(0x000000)
COMMENT = style(0xD00000)
COMMENT_DOC = style(0x3F5FBF, bold=True)
NUMBER = style(0x007F00)
RESERVED_WORD = style(0x00007F, bold=True)
SYSTEM_WORD = style(0x991111, bold=True)
USER_WORD = style(0x0000D0, bold=True)
STRING = style(0xFF901E)
PRAGMA = style(0x007F7F)
STRING_EOL = style(0x000000, 0xE0C0E0)

C_LIKE_STYLES = slots(
    ("default", DEFAULT),
    ("comment", COMMENT),
    ("commentline", COMMENT),
    ("commentdoc", COMMENT_DOC),
    ("number", NUMBER),
    ("word", RESERVED_WORD),
    ("word2", SYSTEM_WORD),
    ("string", STRING),
    ("character", STRING),
    ("uuid", style(0x404080)),
    ("preprocessor", PRAGMA),
    ("operator", style(0x301010)),
    ("identifier", DEFAULT),
    ("stringeol", STRING_EOL),
    ("verbatim", style(0x301010)),
    ("regex", style(0x105090)),
    ("commentlinedoc", COMMENT_DOC),
    ("commentdockeyword", COMMENT_DOC),
    ("commentdockeyworderror", COMMENT_DOC),
    # local structs and typedefs
    ("globalclass", USER_WORD),
)

# cpp lexer style ids
SCE_C_DEFAULT = 0
SCE_C_COMMENT = 1
SCE_C_COMMENTLINE = 2
SCE_C_COMMENTDOC = 3
SCE_C_NUMBER = 4
SCE_C_WORD = 5
SCE_C_STRING = 6
SCE_C_CHARACTER = 7
SCE_C_UUID = 8
SCE_C_PREPROCESSOR = 9
SCE_C_OPERATOR = 10
SCE_C_IDENTIFIER = 11
SCE_C_STRINGEOL = 12
SCE_C_VERBATIM = 13
SCE_C_REGEX = 14
SCE_C_COMMENTLINEDOC = 15
SCE_C_WORD2 = 16
SCE_C_COMMENTDOCKEYWORD = 17
SCE_C_COMMENTDOCKEYWORDERROR = 18
SCE_C_GLOBALCLASS = 19

C_LIKE_STYLE_MAP = bindings([
    (STYLE_DEFAULT, 0),
    (SCE_C_DEFAULT, 0),
    (SCE_C_COMMENT, 1),
    (SCE_C_COMMENTLINE, 2),
    (SCE_C_COMMENTDOC, 3),
    (SCE_C_NUMBER, 4),
    (SCE_C_WORD, 5),
    (SCE_C_WORD2, 6),
    (SCE_C_STRING, 7),
    (SCE_C_CHARACTER, 8),
    (SCE_C_UUID, 9),
    (SCE_C_PREPROCESSOR, 10),
    (SCE_C_OPERATOR, 11),
    (SCE_C_IDENTIFIER, 12),
    (SCE_C_STRINGEOL, 13),
    (SCE_C_VERBATIM, 14),
    (SCE_C_REGEX, 15),
    (SCE_C_COMMENTLINEDOC, 16),
    (SCE_C_COMMENTDOCKEYWORD, 17),
    (SCE_C_COMMENTDOCKEYWORDERROR, 18),
    (SCE_C_GLOBALCLASS, 19),
])

STYLING_WITHIN_PREPROCESSOR = FlagSetting(
    "styling_within_preprocessor", (1, 0), "styling.within.preprocessor"
)

CPP_PREPROCESSOR_PROPERTIES = (
    ("preprocessor.symbol.$(file.patterns.cpp)", "#"),
    ("preprocessor.start.$(file.patterns.cpp)", "if ifdef ifndef"),
    ("preprocessor.middle.$(file.patterns.cpp)", "else elif"),
    ("preprocessor.end.$(file.patterns.cpp)", "endif"),
)


def c_like(filetype, keywords, keyword_map=None, flags=(), properties=()):
    """Catalog over the shared C-like table.

    Without an explicit ``keyword_map`` keyword list N feeds class N.
    """
    if keyword_map is None:
        keyword_map = keyword_bindings(*range(len(keywords)))
    return LanguageCatalog(
        filetype=filetype,
        lexer="cpp",
        styles=C_LIKE_STYLES,
        keywords=tuple(keywords),
        style_map=C_LIKE_STYLE_MAP,
        keyword_map=tuple(keyword_map),
        flags=tuple(flags),
        properties=tuple(properties),
    )


def _c_family_keywords(primary, doc_comment="TODO FIXME"):
    return (
        KeywordClass("primary", primary),
        KeywordClass("secondary"),
        KeywordClass("docComment", doc_comment),
    )


# secondary keywords merge with the global type names
_GLOBAL_TYPES_MAP = keyword_bindings(0, 1, 2, merge_global=[1])

C = c_like(
    Filetype.C,
    _c_family_keywords(
        "if const struct char int float double void long for while do case switch return"
    ),
    _GLOBAL_TYPES_MAP,
    flags=[STYLING_WITHIN_PREPROCESSOR],
    properties=CPP_PREPROCESSOR_PROPERTIES,
)

CPP = c_like(
    Filetype.CPP,
    _c_family_keywords(
        "and and_eq asm auto bitand bitor bool break case catch char class compl const "
        "const_cast continue default delete do double dynamic_cast else enum explicit "
        "export extern false float for friend goto if inline int long mutable namespace "
        "new not not_eq operator or or_eq private protected public register "
        "reinterpret_cast return short signed sizeof static static_cast struct switch "
        "template this throw true try typedef typeid typename union unsigned using "
        "virtual void volatile wchar_t while xor xor_eq"
    ),
    _GLOBAL_TYPES_MAP,
    flags=[STYLING_WITHIN_PREPROCESSOR],
    properties=CPP_PREPROCESSOR_PROPERTIES,
)

CS = c_like(
    Filetype.CS,
    _c_family_keywords(
        "abstract as base bool break byte case catch char checked class const continue "
        "decimal default delegate do double else enum event explicit extern false "
        "finally fixed float for foreach goto if implicit in int interface internal is "
        "lock long namespace new null object operator out override params private "
        "protected public readonly ref return sbyte sealed short sizeof stackalloc "
        "static string struct switch this throw true try typeof uint ulong unchecked "
        "unsafe ushort using virtual void volatile while",
        doc_comment="",
    ),
    _GLOBAL_TYPES_MAP,
    flags=[STYLING_WITHIN_PREPROCESSOR],
)

JAVA = c_like(
    Filetype.JAVA,
    (
        KeywordClass(
            "primary",
            "abstract assert break case catch class const continue default do else "
            "extends final finally for future generic goto if implements import inner "
            "instanceof interface native new outer package private protected public "
            "rest return static super switch synchronized this throw throws transient "
            "try var volatile while true false null",
        ),
        KeywordClass("secondary", "boolean byte char double float int long null short void"),
        KeywordClass("doccomment", "return param author throws"),
        KeywordClass("typedefs"),
    ),
    # typedefs feed the global class list
    keyword_bindings(0, 1, 2, 4),
)

JS = c_like(
    Filetype.JS,
    (
        KeywordClass(
            "primary",
            "abs abstract acos anchor asin atan atan2 big bold boolean break byte case "
            "catch ceil char charAt charCodeAt class concat const continue cos Date "
            "debugger default delete do double else enum escape eval exp export extends "
            "false final finally fixed float floor fontcolor fontsize for fromCharCode "
            "function goto if implements import in indexOf Infinity instanceof int "
            "interface isFinite isNaN italics join lastIndexOf length link log long Math "
            "max MAX_VALUE min MIN_VALUE NaN native NEGATIVE_INFINITY new null Number "
            "package parseFloat parseInt pop POSITIVE_INFINITY pow private protected "
            "public push random return reverse round shift short sin slice small sort "
            "splice split sqrt static strike string String sub substr substring sup "
            "super switch synchronized tan this throw throws toLowerCase toString "
            "toUpperCase transient true try typeof undefined unescape unshift valueOf "
            "var void volatile while with",
        ),
    ),
)

FERITE = c_like(
    Filetype.FERITE,
    (
        KeywordClass(
            "primary",
            "false null self super true abstract alias and arguments attribute_missing "
            "break case class closure conformsToProtocol constructor continue default "
            "deliver destructor diliver directive do else extends eval final fix for "
            "function global handle if iferr implements include instanceof isa "
            "method_missing modifies monitor namespace new or private protected protocol "
            "public raise recipient rename return static switch uses using while",
        ),
        KeywordClass("types", "boolean string number array object void"),
        KeywordClass(
            "docComment",
            "brief class declaration description end example extends function group "
            "implements modifies module namespace param protocol return return static "
            "type variable warning",
        ),
    ),
)

HAXE = c_like(
    Filetype.HAXE,
    (
        KeywordClass(
            "primary",
            "abstract break case catch class continue default do else enum external "
            "extends finally float for function goto if implements import in interface "
            "new package protected public return static super switch this throw throws "
            "try type var while",
        ),
        KeywordClass("secondary", "Bool Enum Float Int Null Void Dynamic String"),
        KeywordClass(
            "classes",
            "Array ArrayAccess Class Date DateTools EReg Enum Hash IntHash IntIter "
            "Iterable Iterator Lambda List Math Protected Reflect Std StringBuf "
            "StringTools Type UInt ValueType Void Xml XmlType",
        ),
    ),
)


D_STYLES = slots(
    ("default", style(0x000000)),
    ("comment", style(0xD00000)),
    ("commentline", style(0xD00000)),
    ("commentdoc", style(0x3F5FBF)),
    ("commentdocnested", style(0x3F5FBF)),
    ("number", style(0x007F00)),
    ("word", style(0x00007F, bold=True)),
    ("word2", style(0x991111, bold=True)),
    ("word3", style(0x991111, bold=True)),
    ("typedef", style(0x0000D0, bold=True)),
    ("string", style(0xFF901E)),
    ("stringeol", style(0x000000, 0xE0C0E0)),
    ("character", style(0xFF901E)),
    ("operator", style(0x301010)),
    ("identifier", style(0x000000)),
    ("commentlinedoc", style(0x3F5FBF, bold=True)),
    ("commentdockeyword", style(0x3F5FBF, bold=True)),
    ("commentdockeyworderror", style(0x3F5FBF)),
)

# d lexer ids match the slot order
D = LanguageCatalog(
    filetype=Filetype.D,
    lexer="d",
    styles=D_STYLES,
    keywords=(
        KeywordClass(
            "primary",
            "__FILE__ __LINE__ __DATA__ __TIME__ __TIMESTAMP__ abstract alias align asm "
            "assert auto body bool break byte case cast catch cdouble cent cfloat char "
            "class const continue creal dchar debug default delegate delete deprecated "
            "do double else enum export extern false final finally float for foreach "
            "function goto idouble if ifloat import in inout int interface invariant "
            "ireal is long mixin module new null out override package pragma private "
            "protected public real return scope short static struct super switch "
            "synchronized template this throw true try typedef typeof ubyte ucent uint "
            "ulong union unittest ushort version void volatile wchar while with",
        ),
        KeywordClass("secondary"),
        KeywordClass(
            "docComment",
            "Authors Bugs Copyright Date Deprecated Examples History License Macros "
            "Params Returns See_Also Standards Throws Version",
        ),
        KeywordClass("types"),
    ),
    style_map=bindings([(STYLE_DEFAULT, 0)] + [(i, i) for i in range(len(D_STYLES))]),
    keyword_map=keyword_bindings(0, 1, 2, 3),
)

CATALOGS = (C, CPP, CS, JAVA, JS, FERITE, HAXE, D)
