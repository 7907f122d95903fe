"""Assembler, FreeBASIC, Fortran, OCaml, Haskell and VHDL catalogs."""

from ..core.catalog import (
    KeywordClass,
    LanguageCatalog,
    bindings,
    keyword_bindings,
    sequential_bindings,
    slots,
    style,
)
from ..core.filetypes import Filetype
from ..core.renderer import STYLE_DEFAULT

_STRINGEOL = style(0x000000, 0xE0C0E0)

_ASM_STYLES = slots(
    ("default", style(0x000000)),
    ("comment", style(0x808080)),
    ("number", style(0x007F00)),
    ("string", style(0xFF901E)),
    ("operator", style(0x000000)),
    ("identifier", style(0x880000)),
    ("cpuinstruction", style(0x111199, bold=True)),
    ("mathinstruction", style(0x7F0000, bold=True)),
    ("register", style(0x000000)),
    ("directive", style(0x3D670F, bold=True)),
    ("directiveoperand", style(0xFF901E)),
    ("commentblock", style(0x808080)),
    ("character", style(0xFF901E)),
    ("stringeol", _STRINGEOL),
    ("extinstruction", style(0x007F7F)),
)

ASM = LanguageCatalog(
    filetype=Filetype.ASM,
    lexer="asm",
    styles=_ASM_STYLES,
    keywords=(
        KeywordClass(
            "instructions",
            "HLT LAD SPI ADD SUB MUL DIV JMP JEZ JGZ JLZ SWAP JSR RET PUSHAC POPAC ADDST "
            "SUBST MULST DIVST LSA LDS PUSH POP CLI LDI INK LIA DEK LDX",
        ),
        KeywordClass("registers"),
        KeywordClass("directives", "ORG LIST NOLIST PAGE EQUIVALENT WORD TEXT"),
    ),
    style_map=bindings([(STYLE_DEFAULT, 0)]) + sequential_bindings(len(_ASM_STYLES)),
    # class 1 (math instructions) is not fed
    keyword_map=keyword_bindings(0, 2, 3),
)


_BASIC_STYLES = slots(
    ("default", style(0x000000)),
    ("comment", style(0x808080)),
    ("number", style(0x007F00)),
    ("word", style(0x00007F, bold=True)),
    ("string", style(0xFF901E)),
    ("preprocessor", style(0x007F7F)),
    ("operator", style(0x301010)),
    ("identifier", style(0x000000)),
    ("date", style(0x1A6500)),
    ("stringeol", _STRINGEOL),
    ("word2", style(0x007F7F, bold=True)),
    ("word3", style(0x991111)),
    ("word4", style(0x0000D0)),
    ("constant", style(0x007F7F)),
    ("asm", style(0x105090)),
    ("label", style(0x007F7F)),
    ("error", style(0xD00000)),
    ("hexnumber", style(0x007F00)),
    ("binnumber", style(0x007F00)),
)

BASIC = LanguageCatalog(
    filetype=Filetype.BASIC,
    lexer="freebasic",
    styles=_BASIC_STYLES,
    keywords=(
        KeywordClass(
            "keywords",
            "as asm bit bitreset bitset byte case cint close cls color const continue "
            "cshort csign csng cubyte cuint culngint custom data dim do double else "
            "elseif end enum environ eof err error exec exit exp export extern field "
            "fix for function get gosub goto hex hibyte hiword if iif imp input instr "
            "int integer is kill left len let lobyte loc local locate lof log long "
            "longint loop loword lset mklongint mks mkshort mod next not on once open "
            "or out pointer pos preserve preset private public put read redim rem reset "
            "restore return sizeof sleep space static step stop str string sub then "
            "time timer to type ubound ubyte ucase uinteger ulongint union unsigned "
            "until ushort using val val64 valint wait while with xor",
        ),
        KeywordClass(
            "preprocessor",
            "#define defined #dynamic #else #endif #endmacro #error #if #ifdef #ifndef "
            "#inclib #include #libpath #line #macro #print #undef",
        ),
        KeywordClass("user1"),
        KeywordClass("user2"),
    ),
    style_map=bindings([(STYLE_DEFAULT, 0)]) + sequential_bindings(len(_BASIC_STYLES)),
    keyword_map=keyword_bindings(0, 1, 2, 3),
)


FORTRAN = LanguageCatalog(
    filetype=Filetype.FORTRAN,
    lexer="f77",
    styles=slots(
        ("default", style(0x000000)),
        ("comment", style(0x808080)),
        ("number", style(0x007F00)),
        ("string", style(0xFF901E)),
        ("operator", style(0x301010)),
        ("identifier", style(0x000000)),
        ("string2", style(0x111199, bold=True)),
        ("word", style(0x7F0000, bold=True)),
        ("word2", style(0x000099, bold=True)),
        ("word3", style(0x3D670F, bold=True)),
        ("preprocessor", style(0x007F7F)),
        ("operator2", style(0x301010, bold=True)),
        ("continuation", style(0x000000, 0xF0E080)),
        ("stringeol", _STRINGEOL),
        ("label", style(0xA861A8, bold=True)),
    ),
    keywords=(
        KeywordClass("primary"),
        KeywordClass("intrinsic_functions"),
        KeywordClass("user_functions"),
    ),
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),    # default
        (1, 1),    # comment
        (2, 2),    # number
        (3, 3),    # string1
        (6, 4),    # operator
        (7, 5),    # identifier
        (4, 6),    # string2
        (8, 7),    # word
        (9, 8),    # word2
        (10, 9),   # word3
        (11, 10),  # preprocessor
        (12, 11),  # operator2
        (14, 12),  # continuation
        (5, 13),   # stringeol
        (13, 14),  # label
    ]),
    keyword_map=keyword_bindings(0, 1, 2),
)


CAML = LanguageCatalog(
    filetype=Filetype.CAML,
    lexer="caml",
    styles=slots(
        ("default", style(0x000000)),
        ("comment", style(0x808080)),
        ("comment1", style(0x808080)),
        ("comment2", style(0x808080)),
        ("comment3", style(0x808080)),
        ("number", style(0x7F7F00)),
        ("keyword", style(0x001A7F, bold=True)),
        ("keyword2", style(0x7F0000, bold=True)),
        ("string", style(0x7F007F)),
        ("char", style(0x7F007F)),
        ("operator", style(0x000000)),
        ("identifier", style(0x111199)),
        ("tagname", style(0x000000, 0xFFE0FF, bold=True)),
        ("linenum", style(0x000000, 0xC0C0C0)),
    ),
    keywords=(
        KeywordClass(
            "keywords",
            "and as assert asr begin class constraint do done downto else end exception "
            "external false for fun function functor if in include inherit initializer "
            "land lazy let lor lsl lsr lxor match method mod module mutable new object "
            "of open or private rec sig struct then to true try type val virtual when "
            "while with",
        ),
        KeywordClass("keywords_optional", "option Some None ignore ref"),
    ),
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),    # default
        (12, 1),   # comment
        (13, 2),   # comment1
        (14, 3),   # comment2
        (15, 4),   # comment3
        (8, 5),    # number
        (3, 6),    # keyword
        (4, 7),    # keyword2
        (11, 8),   # string
        (9, 9),    # char
        (7, 10),   # operator
        (1, 11),   # identifier
        (2, 12),   # tagname
        (6, 13),   # linenum
    ]),
    keyword_map=keyword_bindings(0, 1),
)


HASKELL = LanguageCatalog(
    filetype=Filetype.HASKELL,
    lexer="haskell",
    styles=slots(
        ("default", style(0x000000)),
        ("commentline", style(0x808080)),
        ("commentblock", style(0x808080)),
        ("commentblock2", style(0x808080)),
        ("commentblock3", style(0x808080)),
        ("number", style(0x007F00)),
        ("keyword", style(0x00007F, bold=True)),
        ("import", style(0x991111)),
        ("string", style(0xFF901E)),
        ("character", style(0xFF901E)),
        ("class", style(0x0000D0)),
        ("operator", style(0x301010)),
        ("identifier", style(0x000000)),
        ("instance", style(0x000000)),
        ("capital", style(0x635B00)),
        ("module", style(0x007F7F)),
        ("data", style(0x000000)),
    ),
    keywords=(
        KeywordClass(
            "keywords",
            "as case class data deriving do else if import in infixl infixr instance "
            "let module of primitive qualified then type where",
        ),
    ),
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),    # default
        (13, 1),   # commentline
        (14, 2),   # commentblock
        (15, 3),   # commentblock2
        (16, 4),   # commentblock3
        (3, 5),    # number
        (2, 6),    # keyword
        (10, 7),   # import
        (4, 8),    # string
        (5, 9),    # character
        (6, 10),   # class
        (11, 11),  # operator
        (1, 12),   # identifier
        (12, 13),  # instance
        (8, 14),   # capital
        (7, 15),   # module
        (9, 16),   # data
    ]),
    keyword_map=keyword_bindings(0),
)


_VHDL_STYLES = slots(
    ("default", style(0x000000)),
    ("comment", style(0xD00000)),
    ("comment_line_bang", style(0x3F5FBF)),
    ("number", style(0x007F00)),
    ("string", style(0xFF901E)),
    ("operator", style(0x301010)),
    ("identifier", style(0x000000)),
    ("stringeol", _STRINGEOL),
    ("keyword", style(0x001A7F, bold=True)),
    ("stdoperator", style(0x007F7F)),
    ("attribute", style(0x804020)),
    ("stdfunction", style(0x808020, bold=True)),
    ("stdpackage", style(0x208020)),
    ("stdtype", style(0x208080)),
    ("userword", style(0x804020, bold=True)),
)

VHDL = LanguageCatalog(
    filetype=Filetype.VHDL,
    lexer="vhdl",
    styles=_VHDL_STYLES,
    keywords=(
        KeywordClass(
            "keywords",
            "access after alias all architecture array assert attribute begin block "
            "body buffer bus case component configuration constant disconnect downto "
            "else elsif end entity exit file for function generate generic group "
            "guarded if impure in inertial inout is label library linkage literal loop "
            "map new next null of on open others out package port postponed procedure "
            "process pure range record register reject report return select severity "
            "shared signal subtype then to transport type unaffected units until use "
            "variable wait when while with",
        ),
        KeywordClass(
            "operators",
            "abs and mod nand nor not or rem rol ror sla sll sra srl xnor xor",
        ),
        KeywordClass(
            "attributes",
            "left right low high ascending image value pos val succ pred leftof rightof "
            "base range reverse_range length delayed stable quiet transaction event "
            "active last_event last_active last_value driving driving_value simple_name "
            "path_name instance_name",
        ),
        KeywordClass(
            "std_functions",
            "now readline read writeline write endfile resolved to_bit to_bitvector "
            "to_stdulogic to_stdlogicvector to_stdulogicvector to_x01 to_x01z to_UX01 "
            "rising_edge falling_edge is_x shift_left shift_right rotate_left "
            "rotate_right resize to_integer to_unsigned to_signed std_match to_01",
        ),
        KeywordClass(
            "std_packages",
            "std ieee work standard textio std_logic_1164 std_logic_arith "
            "std_logic_misc std_logic_signed std_logic_textio std_logic_unsigned "
            "numeric_bit numeric_std math_complex math_real vital_primitives "
            "vital_timing",
        ),
        KeywordClass(
            "std_types",
            "boolean bit character severity_level integer real time delay_length "
            "natural positive string bit_vector file_open_kind file_open_status line "
            "text side width std_ulogic std_ulogic_vector std_logic std_logic_vector "
            "X01 X01Z UX01 UX01Z unsigned signed",
        ),
        KeywordClass("userwords"),
    ),
    style_map=bindings([(STYLE_DEFAULT, 0)]) + sequential_bindings(len(_VHDL_STYLES)),
    keyword_map=keyword_bindings(0, 1, 2, 3, 4, 5, 6),
)

CATALOGS = (ASM, BASIC, FORTRAN, CAML, HASKELL, VHDL)
