"""Python, shell, Pascal, Makefile, Perl, Ruby, Lua, Tcl and O-Matrix catalogs."""

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
from .c_family import (
    COMMENT,
    COMMENT_DOC,
    SCE_C_CHARACTER,
    SCE_C_COMMENT,
    SCE_C_COMMENTDOC,
    SCE_C_COMMENTLINE,
    SCE_C_DEFAULT,
    SCE_C_IDENTIFIER,
    SCE_C_NUMBER,
    SCE_C_OPERATOR,
    SCE_C_PREPROCESSOR,
    SCE_C_REGEX,
    SCE_C_STRING,
    SCE_C_WORD,
)

PYTHON_STYLES = slots(
    ("default", style(0x000000)),
    ("commentline", style(0x808080)),
    ("number", style(0x400080)),
    ("string", style(0x008000)),
    ("character", style(0x008000)),
    ("word", style(0x600080, bold=True)),
    ("triple", style(0x008020)),
    ("tripledouble", style(0x404000)),
    ("classname", style(0x003030)),
    ("defname", style(0x000080)),
    ("operator", style(0x300080)),
    ("identifier", style(0x000000)),
    ("commentblock", style(0x808080)),
    ("stringeol", style(0x000000, 0xE0C0E0)),
    ("word2", style(0xDD00A6, bold=True)),
    ("decorator", style(0x808000)),
)

PYTHON = LanguageCatalog(
    filetype=Filetype.PYTHON,
    lexer="python",
    styles=PYTHON_STYLES,
    keywords=(
        KeywordClass(
            "primary",
            "and as assert break class continue def del elif else except exec finally "
            "for from global if import in is lambda not or pass print raise return try "
            "while with yield False None True",
        ),
        KeywordClass("identifiers"),
    ),
    style_map=bindings([(STYLE_DEFAULT, 0)]) + sequential_bindings(len(PYTHON_STYLES)),
    keyword_map=keyword_bindings(0, 1),
    properties=(
        ("fold.comment.python", "1"),
        ("fold.quotes.python", "1"),
    ),
)


# bash lexer ids: commentline=2 ... backticks=11
_SHELL_STYLE_PAIRS = [
    (STYLE_DEFAULT, 0),
    (0, 0),
    (2, 1),
    (3, 2),
    (4, 3),
    (5, 4),
    (6, 5),
    (7, 6),
    (8, 7),
    (11, 8),
    (10, 9),
    (9, 10),
]

SH = LanguageCatalog(
    filetype=Filetype.SH,
    lexer="bash",
    styles=slots(
        ("default", style(0x000000)),
        ("commentline", COMMENT),
        ("number", style(0x007F00)),
        ("word", style(0x119911, bold=True)),
        ("string", style(0xFF901E)),
        ("character", style(0x404000)),
        ("operator", style(0x301010)),
        ("identifier", style(0x000000)),
        ("backticks", style(0x000000, 0xE0C0E0)),
        ("param", style(0x9F0000)),
        ("scalar", style(0x105090)),
    ),
    keywords=(
        KeywordClass(
            "primary",
            "break case continue do done elif else esac eval exit export fi for goto if "
            "in integer return set shift then until while",
        ),
    ),
    style_map=bindings(_SHELL_STYLE_PAIRS),
    keyword_map=keyword_bindings(0),
)


# Pascal reuses the cpp lexer's style ids
PASCAL = LanguageCatalog(
    filetype=Filetype.PASCAL,
    lexer="pascal",
    styles=slots(
        ("default", style(0x0000FF)),
        ("comment", COMMENT),
        ("number", style(0x007F00)),
        ("word", style(0x111199, bold=True)),
        ("string", style(0xFF901E)),
        ("character", style(0x404000)),
        ("preprocessor", style(0x007F7F)),
        ("operator", style(0x301010)),
        ("identifier", style(0x000000)),
        ("regex", style(0x1B6313)),
        ("commentline", COMMENT),
        ("commentdoc", COMMENT_DOC),
    ),
    keywords=(
        KeywordClass(
            "primary",
            "word integer char string byte real for to do until repeat program if uses "
            "then else case var begin end asm unit interface implementation procedure "
            "function object try class",
        ),
    ),
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (SCE_C_DEFAULT, 0),
        (SCE_C_COMMENT, 1),
        (SCE_C_NUMBER, 2),
        (SCE_C_WORD, 3),
        (SCE_C_STRING, 4),
        (SCE_C_CHARACTER, 5),
        (SCE_C_PREPROCESSOR, 6),
        (SCE_C_OPERATOR, 7),
        (SCE_C_IDENTIFIER, 8),
        (SCE_C_REGEX, 9),
        (SCE_C_COMMENTLINE, 10),
        (SCE_C_COMMENTDOC, 11),
    ]),
    keyword_map=keyword_bindings(0),
)


MAKE = LanguageCatalog(
    filetype=Filetype.MAKE,
    lexer="makefile",
    styles=slots(
        ("default", style(0x00002F)),
        ("comment", COMMENT),
        ("preprocessor", style(0x007F7F)),
        ("identifier", style(0x007F00)),
        ("operator", style(0x301010)),
        ("target", style(0x0000FF)),
        ("ideol", style(0x008000)),
    ),
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),
        (1, 1),
        (2, 2),
        (3, 3),
        (4, 4),
        (5, 5),
        (9, 6),
    ]),
)


PERL = LanguageCatalog(
    filetype=Filetype.PERL,
    lexer="perl",
    styles=slots(
        ("default", style(0x000000)),
        ("error", style(0xFF0000)),
        ("commentline", COMMENT),
        ("number", style(0x007F00)),
        ("word", style(0x111199, bold=True)),
        ("string", style(0xFF901E)),
        ("character", style(0xFF901E)),
        ("preprocessor", style(0x007F7F)),
        ("operator", style(0x301010)),
        ("identifier", style(0x000000)),
        ("scalar", style(0x7F0000)),
        ("pod", style(0x035650)),
        ("regex", style(0x105090)),
        ("array", style(0x105090)),
        ("hash", style(0x105090)),
        ("symboltable", style(0x105090)),
        ("backticks", style(0x000000, 0xE0C0E0)),
        ("pod_verbatim", style(0x004000, 0xC0FFC0)),
        ("reg_subst", style(0x000000, 0xF0E080)),
        ("datasection", style(0x600000, 0xFFF0D8)),
        ("here_delim", style(0x000000, 0xDDD0DD)),
        ("here_q", style(0x7F007F, 0xDDD0DD)),
        ("here_qq", style(0x7F007F, 0xDDD0DD, bold=True)),
        ("here_qx", style(0x7F007F, 0xDDD0DD, bold=True)),
        ("string_q", style(0x7F007F)),
        ("string_qq", style(0xFF901E)),
        ("string_qx", style(0x000000, 0xE0C0E0)),
        ("string_qr", style(0x105090)),
        ("string_qw", style(0x105090)),
        ("variable_indexer", style(0x000000)),
    ),
    keywords=(
        KeywordClass(
            "primary",
            "NULL __FILE__ __LINE__ __PACKAGE__ __DATA__ __END__ AUTOLOAD BEGIN CORE "
            "DESTROY END EQ GE GT INIT LE LT NE CHECK abs accept alarm and atan2 bind "
            "binmode bless caller chdir chmod chomp chop chown chr chroot close closedir "
            "cmp connect continue cos crypt dbmclose dbmopen defined delete die do dump "
            "each else elsif endgrent endhostent endnetent endprotoent endpwent "
            "endservent eof eq eval exec exists exit exp fcntl fileno flock for foreach "
            "fork format formline ge getc getgrent getgrgid getgrnam gethostbyaddr "
            "gethostbyname gethostent getlogin getnetbyaddr getnetbyname getnetent "
            "getpeername getpgrp getppid getpriority getprotobyname getprotobynumber "
            "getprotoent getpwent getpwnam getpwuid getservbyname getservbyport "
            "getservent getsockname getsockopt glob gmtime goto grep gt hex if index int "
            "ioctl join keys kill last lc lcfirst le length link listen local localtime "
            "lock log lstat lt m map mkdir msgctl msgget msgrcv msgsnd my ne next no not "
            "oct open opendir or ord our pack package pipe pop pos print printf "
            "prototype push q qq qr quotemeta qu qw qx rand read readdir readline "
            "readlink readpipe recv redo ref rename require reset return reverse "
            "rewinddir rindex rmdir s scalar seek seekdir select semctl semget semop "
            "send setgrent sethostent setnetent setpgrp setpriority setprotoent "
            "setpwent setservent setsockopt shift shmctl shmget shmread shmwrite "
            "shutdown sin sleep socket socketpair sort splice split sprintf sqrt srand "
            "stat study sub substr symlink syscall sysopen sysread sysseek system "
            "syswrite tell telldir tie tied time times tr truncate uc ucfirst umask "
            "undef unless unlink unpack unshift untie until use utime values vec wait "
            "waitpid wantarray warn while write x xor y",
        ),
    ),
    # perl lexer ids: punctuation=8 and longquote=19 are left unstyled
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),
        (1, 1),
        (2, 2),
        (4, 3),
        (5, 4),
        (6, 5),
        (7, 6),
        (9, 7),
        (10, 8),
        (11, 9),
        (12, 10),
        (3, 11),
        (17, 12),
        (13, 13),
        (14, 14),
        (15, 15),
        (20, 16),
        (31, 17),
        (18, 18),
        (21, 19),
        (22, 20),
        (23, 21),
        (24, 22),
        (25, 23),
        (26, 24),
        (27, 25),
        (28, 26),
        (29, 27),
        (30, 28),
        (16, 29),
    ]),
    keyword_map=keyword_bindings(0),
    properties=(("styling.within.preprocessor", "1"),),
)


RUBY = LanguageCatalog(
    filetype=Filetype.RUBY,
    lexer="ruby",
    styles=slots(
        ("default", style(0x000000)),
        ("commentline", COMMENT),
        ("number", style(0x400080)),
        ("string", style(0x008000)),
        ("character", style(0x008000)),
        ("word", style(0x111199, bold=True)),
        ("global", style(0x111199)),
        ("symbol", style(0x008020)),
        ("classname", style(0x7F0000, bold=True)),
        ("defname", style(0x7F0000)),
        ("operator", style(0x000000)),
        ("identifier", style(0x000000)),
        ("modulename", style(0x111199, bold=True)),
        ("backticks", style(0x000000, 0xE0C0E0)),
        ("instancevar", style(0x000000, bold=True)),
        ("classvar", style(0x000000, bold=True)),
        ("heredelim", style(0x000000)),
        ("worddemoted", style(0x111199)),
        ("stdin", style(0x000000)),
        ("stdout", style(0x000000)),
        ("stderr", style(0x000000)),
        ("datasection", style(0x600000, 0xFFF0D8)),
        ("regex", style(0x105090)),
        ("here_q", style(0x7F007F, 0xDDD0DD)),
        ("here_qq", style(0x7F007F, 0xDDD0DD, bold=True)),
        ("here_qx", style(0x7F007F, 0xDDD0DD, bold=True)),
        ("string_q", style(0x7F007F)),
        ("string_qq", style(0xFF901E)),
        ("string_qx", style(0x000000, 0xE0C0E0)),
        ("string_qr", style(0x105090)),
        ("string_qw", style(0x105090)),
        ("upper_bound", style(0x000000)),
        ("error", style(0xE500CC)),
        ("pod", style(0x035650)),
    ),
    keywords=(
        KeywordClass(
            "primary",
            "load define_method attr_accessor attr_writer attr_reader include __FILE__ "
            "and def end in or self unless __LINE__ begin defined? ensure module redo "
            "super until BEGIN break do false next rescue then when END case else for "
            "nil require retry true while alias class elsif if not return undef yield",
        ),
    ),
    # ruby lexer ids: stderr=40, upper_bound=41
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),
        (2, 1),
        (4, 2),
        (6, 3),
        (7, 4),
        (5, 5),
        (13, 6),
        (14, 7),
        (8, 8),
        (9, 9),
        (10, 10),
        (11, 11),
        (15, 12),
        (18, 13),
        (16, 14),
        (17, 15),
        (20, 16),
        (29, 17),
        (30, 18),
        (31, 19),
        (40, 20),
        (19, 21),
        (12, 22),
        (21, 23),
        (22, 24),
        (23, 25),
        (24, 26),
        (25, 27),
        (26, 28),
        (27, 29),
        (28, 30),
        (41, 31),
        (1, 32),
        (3, 33),
    ]),
    keyword_map=keyword_bindings(0),
)


_LUA_STYLES = slots(
    ("default", style(0x000000)),
    ("comment", COMMENT),
    ("commentline", COMMENT),
    ("commentdoc", COMMENT_DOC),
    ("number", style(0x007F00)),
    ("word", style(0x00007F, bold=True)),
    ("string", style(0xFF901E)),
    ("character", style(0x008000)),
    ("literalstring", style(0x008020)),
    ("preprocessor", style(0x007F7F)),
    ("operator", style(0x301010)),
    ("identifier", style(0x000000)),
    ("stringeol", style(0x000000, 0xE0C0E0)),
    ("function_basic", style(0x991111)),
    ("function_other", style(0x690000)),
    ("coroutines", style(0x66005C)),
    ("word5", style(0x7979FF)),
    ("word6", style(0xAD00FF)),
    ("word7", style(0x03D000)),
    ("word8", style(0xFF7600)),
)

LUA = LanguageCatalog(
    filetype=Filetype.LUA,
    lexer="lua",
    styles=_LUA_STYLES,
    keywords=(
        KeywordClass(
            "keywords",
            "and break do else elseif end false for function if in local nil not or "
            "repeat return then true until while",
        ),
        KeywordClass(
            "function_basic",
            "_VERSION assert collectgarbage dofile error gcinfo loadfile loadstring "
            "print rawget rawset require tonumber tostring type unpack _ALERT "
            "_ERRORMESSAGE _INPUT _PROMPT _OUTPUT _STDERR _STDIN _STDOUT call dostring "
            "foreach foreachi getn globals newtype sort tinsert tremove _G getfenv "
            "getmetatable ipairs loadlib next pairs pcall rawequal setfenv setmetatable "
            "xpcall string table math coroutine io os debug load module select",
        ),
        KeywordClass(
            "function_other",
            "abs acos asin atan atan2 ceil cos deg exp floor format frexp gsub ldexp "
            "log log10 max min mod rad random randomseed sin sqrt strbyte strchar "
            "strfind strlen strlower strrep strsub strupper tan string.byte string.char "
            "string.dump string.find string.len string.lower string.rep string.sub "
            "string.upper string.format string.gfind string.gsub table.concat "
            "table.foreach table.foreachi table.getn table.sort table.insert "
            "table.remove table.setn math.abs math.acos math.asin math.atan math.atan2 "
            "math.ceil math.cos math.deg math.exp math.floor math.frexp math.ldexp "
            "math.log math.log10 math.max math.min math.mod math.pi math.pow math.rad "
            "math.random math.randomseed math.sin math.sqrt math.tan string.gmatch "
            "string.match string.reverse table.maxn math.cosh math.fmod math.modf "
            "math.sinh math.tanh math.huge",
        ),
        KeywordClass(
            "coroutines",
            "openfile closefile readfrom writeto appendto remove rename flush seek "
            "tmpfile tmpname read write clock date difftime execute exit getenv "
            "setlocale time coroutine.create coroutine.resume coroutine.status "
            "coroutine.wrap coroutine.yield io.close io.flush io.input io.lines io.open "
            "io.output io.read io.tmpfile io.type io.write io.stdin io.stdout io.stderr "
            "os.clock os.date os.difftime os.execute os.exit os.getenv os.remove "
            "os.rename os.setlocale os.time os.tmpname coroutine.running package.cpath "
            "package.loaded package.loadlib package.path package.preload package.seeall "
            "io.popen",
        ),
        KeywordClass("user1"),
        KeywordClass("user2"),
        KeywordClass("user3"),
        KeywordClass("user4"),
    ),
    style_map=bindings([(STYLE_DEFAULT, 0)]) + sequential_bindings(len(_LUA_STYLES)),
    keyword_map=keyword_bindings(0, 1, 2, 3, 4, 5, 6, 7),
)


TCL = LanguageCatalog(
    filetype=Filetype.TCL,
    lexer="tcl",
    styles=slots(
        ("default", style(0x000000)),
        ("comment", COMMENT),
        ("commentline", COMMENT),
        ("number", style(0x007F00)),
        ("operator", style(0x301010)),
        ("identifier", style(0xA20000)),
        ("wordinquote", style(0x7F007F)),
        ("inquote", style(0x7F007F)),
        ("substitution", style(0x111199)),
        ("modifier", style(0x7F007F)),
        ("expand", style(0x000000)),
        ("wordtcl", style(0x111199, bold=True)),
        ("wordtk", style(0x7F0000, bold=True)),
        ("worditcl", style(0x111199, bold=True)),
        ("wordtkcmds", style(0x7F0000, bold=True)),
        ("wordexpand", style(0x7F0000, bold=True)),
    ),
    keywords=(
        KeywordClass("tcl"),
        KeywordClass("tk"),
        KeywordClass("itcl"),
        KeywordClass("tkcommands"),
        KeywordClass("expand"),
    ),
    # tcl lexer ids: sub_brace=9 is left unstyled, words start at 12
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),
        (1, 1),
        (2, 2),
        (3, 3),
        (6, 4),
        (7, 5),
        (4, 6),
        (5, 7),
        (8, 8),
        (10, 9),
        (11, 10),
        (12, 11),
        (13, 12),
        (14, 13),
        (15, 14),
        (16, 15),
    ]),
    keyword_map=keyword_bindings(0, 1, 2, 3, 4),
)


# O-Matrix scripts are styled with the shell lexer's ids
OMS = LanguageCatalog(
    filetype=Filetype.OMS,
    lexer="oms",
    styles=slots(
        ("default", style(0x000000)),
        ("commentline", style(0x909090)),
        ("number", style(0x007F00)),
        ("word", style(0x991111)),
        ("string", style(0xFF901E)),
        ("character", style(0x404000)),
        ("operator", style(0x000000)),
        ("identifier", style(0x000000)),
        ("backticks", style(0x000000, 0xE0C0E0)),
        ("param", style(0x991111, 0x0000FF)),
        ("scalar", style(0x0000FF)),
    ),
    keywords=(
        KeywordClass(
            "primary",
            "clear seq fillcols fillrowsgaspect gaddview gtitle gxaxis gyaxis max "
            "contour gcolor gplot fill coldim arcov dpss fspec cos gupdate rowdim print "
            "for to begin end write cocreate coinvoke codispsave codispset copropput "
            "colsum sqrt adddialog addcontrol delwin fillrows function gaspect conjdir",
        ),
    ),
    style_map=bindings(_SHELL_STYLE_PAIRS),
    keyword_map=keyword_bindings(0),
)

CATALOGS = (PYTHON, SH, PASCAL, MAKE, PERL, RUBY, LUA, TCL, OMS)
