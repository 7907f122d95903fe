"""Diff, LaTeX, config file, CSS and SQL catalogs."""

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

_DIFF_STYLES = slots(
    ("default", style(0x000000)),
    ("comment", style(0x808080)),
    ("command", style(0x7F7F00)),
    ("header", style(0x7F0000)),
    ("position", style(0x00007F)),
    ("deleted", style(0xFF2727)),
    ("added", style(0x34B034)),
)

DIFF = LanguageCatalog(
    filetype=Filetype.DIFF,
    lexer="diff",
    styles=_DIFF_STYLES,
    style_map=bindings([(STYLE_DEFAULT, 0)]) + sequential_bindings(len(_DIFF_STYLES)),
)


_LATEX_STYLES = slots(
    ("default", style(0x00002F)),
    ("command", style(0xFF0000, bold=True)),
    ("tag", style(0x007F7F, bold=True)),
    ("math", style(0x00007F)),
    ("comment", style(0x007F00)),
)

LATEX = LanguageCatalog(
    filetype=Filetype.LATEX,
    lexer="latex",
    styles=_LATEX_STYLES,
    keywords=(KeywordClass("primary", "section subsection begin item"),),
    style_map=bindings([(STYLE_DEFAULT, 0)]) + sequential_bindings(len(_LATEX_STYLES)),
    keyword_map=keyword_bindings(0),
)


CONF = LanguageCatalog(
    filetype=Filetype.CONF,
    lexer="props",
    styles=slots(
        ("default", style(0x7F0000)),
        ("comment", style(0x808080)),
        ("section", style(0x000090, bold=True)),
        ("key", style(0x00007F)),
        ("assignment", style(0x000000)),
        ("defval", style(0x00007F)),
    ),
    # props lexer: assignment=3, defval=4, key=5
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),
        (1, 1),
        (2, 2),
        (5, 3),
        (3, 4),
        (4, 5),
    ]),
)


CSS = LanguageCatalog(
    filetype=Filetype.CSS,
    lexer="css",
    styles=slots(
        ("default", style(0x003399)),
        ("comment", style(0x808080)),
        ("tag", style(0x2166A4, bold=True)),
        ("class", style(0x007F00, bold=True)),
        ("pseudoclass", style(0x660010, bold=True)),
        ("unknown_pseudoclass", style(0xFF0099)),
        ("unknown_identifier", style(0xFF0099)),
        ("operator", style(0x301010)),
        ("identifier", style(0x000099, bold=True)),
        ("doublestring", style(0x330066)),
        ("singlestring", style(0x330066)),
        ("attribute", style(0x007F00)),
        ("value", style(0x303030)),
        ("id", style(0x7F0000)),
        ("identifier2", style(0x6B6BFF)),
        ("important", style(0xFF0000, bold=True)),
    ),
    keywords=(
        KeywordClass(
            "primary",
            "color background-color background-image background-repeat "
            "background-attachment background-position background font-family "
            "font-style font-variant font-weight font-size font word-spacing "
            "letter-spacing text-decoration vertical-align text-transform text-align "
            "text-indent line-height margin-top margin-right margin-bottom margin-left "
            "margin padding-top padding-right padding-bottom padding-left padding "
            "border-top-width border-right-width border-bottom-width border-left-width "
            "border-width border-top border-right border-bottom border-left border "
            "border-color border-style width height float clear display white-space "
            "list-style-type list-style-image list-style-position list-style",
        ),
        KeywordClass(
            "pseudoclasses",
            "first-letter first-line link active visited lang first-child focus hover "
            "before after left right first",
        ),
        KeywordClass(
            "secondary",
            "border-top-color border-right-color border-bottom-color border-left-color "
            "border-color border-top-style border-right-style border-bottom-style "
            "border-left-style border-style top right bottom left position z-index "
            "direction unicode-bidi min-width max-width min-height max-height overflow "
            "clip visibility content quotes counter-reset counter-increment "
            "marker-offset size marks page-break-before page-break-after "
            "page-break-inside page orphans widows font-stretch font-size-adjust "
            "unicode-range units-per-em src panose-1 stemv stemh slope cap-height "
            "x-height ascent descent widths bbox definition-src baseline centerline "
            "mathline topline text-shadow caption-side table-layout border-collapse "
            "border-spacing empty-cells speak-header cursor outline outline-width "
            "outline-style outline-color volume speak pause-before pause-after pause "
            "cue-before cue-after cue play-during azimuth elevation speech-rate "
            "voice-family pitch pitch-range stress richness speak-punctuation "
            "speak-numeral",
        ),
    ),
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),    # default
        (9, 1),    # comment
        (1, 2),    # tag
        (2, 3),    # class
        (3, 4),    # pseudoclass
        (4, 5),    # unknown pseudoclass
        (7, 6),    # unknown identifier
        (5, 7),    # operator
        (6, 8),    # identifier
        (13, 9),   # double string
        (14, 10),  # single string
        (16, 11),  # attribute
        (8, 12),   # value
        (10, 13),  # id
        (15, 14),  # identifier2
        (11, 15),  # important
    ]),
    keyword_map=keyword_bindings(0, 1, 2),
)


SQL = LanguageCatalog(
    filetype=Filetype.SQL,
    lexer="sql",
    styles=slots(
        ("default", style(0x000000)),
        ("comment", style(0x808080)),
        ("commentline", style(0x808080)),
        ("commentdoc", style(0x3F5FBF)),
        ("number", style(0x7F7F00)),
        ("word", style(0x001A7F, bold=True)),
        ("word2", style(0x7F0000, bold=True)),
        ("string", style(0x7F007F)),
        ("character", style(0x000000)),
        ("operator", style(0x000000, bold=True)),
        ("identifier", style(0x111199)),
        ("sqlplus", style(0x000000)),
        ("sqlplus_prompt", style(0x000000)),
        ("sqlplus_comment", style(0x000000)),
        ("quotedidentifier", style(0x111199)),
    ),
    keywords=(
        KeywordClass(
            "keywords",
            "absolute action add admin after aggregate alias all allocate alter and any "
            "are array as asc assertion at authorization before begin binary bit blob "
            "boolean both breadth by call cascade cascaded case cast catalog char "
            "character check class clob close collate collation column commit "
            "completion connect connection constraint constraints constructor continue "
            "corresponding create cross cube current current_date current_path "
            "current_role current_time current_timestamp current_user cursor cycle data "
            "date day deallocate dec decimal declare default deferrable deferred delete "
            "depth deref desc describe descriptor destroy destructor deterministic "
            "dictionary diagnostics disconnect distinct domain double drop dynamic each "
            "else end end-exec equals escape every except exception exec execute "
            "external false fetch first float for foreign found from free full function "
            "general get global go goto grant group grouping having host hour identity "
            "if ignore immediate in indicator initialize initially inner inout input "
            "insert int integer intersect interval into is isolation iterate join key "
            "language large last lateral leading left less level like limit local "
            "localtime localtimestamp locator map match minute modifies modify module "
            "month names national natural nchar nclob new next no none not null numeric "
            "object of off old on only open operation option or order ordinality out "
            "outer output pad parameter parameters partial path postfix precision "
            "prefix preorder prepare preserve primary prior privileges procedure public "
            "read reads real recursive ref references referencing relative restrict "
            "result return returns revoke right role rollback rollup routine row rows "
            "savepoint schema scroll scope search second section select sequence "
            "session session_user set sets size smallint some space specific "
            "specifictype sql sqlexception sqlstate sqlwarning start state statement "
            "static structure system_user table temporary terminate than then time "
            "timestamp timezone_hour timezone_minute to trailing transaction "
            "translation year zone treat trigger true under union unique unknown "
            "unnest update usage user using value values varchar variable varying view "
            "when whenever where with without work write",
        ),
    ),
    style_map=bindings([
        (STYLE_DEFAULT, 0),
        (0, 0),    # default
        (1, 1),    # comment
        (2, 2),    # commentline
        (3, 3),    # commentdoc
        (4, 4),    # number
        (5, 5),    # word
        (16, 6),   # word2
        (6, 7),    # string
        (7, 8),    # character
        (10, 9),   # operator
        (11, 10),  # identifier
        (8, 11),   # sqlplus
        (9, 12),   # sqlplus prompt
        (13, 13),  # sqlplus comment
        (23, 14),  # quoted identifier
    ]),
    keyword_map=keyword_bindings(0),
)

CATALOGS = (DIFF, LATEX, CONF, CSS, SQL)
