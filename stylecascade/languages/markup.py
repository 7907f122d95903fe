"""XML, HTML, PHP and DocBook.

XML owns the markup table: HTML and SGML styles plus sub-tables for PHP and
embedded JavaScript. HTML and PHP have no styles of their own; all three
apply the same binding, which also pulls the Python table for embedded
Python regions.

DocBook runs the same xml lexer over a table of its own.
"""

from ..core.catalog import (
    KeywordBinding,
    KeywordClass,
    LanguageCatalog,
    bindings,
    keyword_bindings,
    slots,
    style,
)
from ..core.filetypes import Filetype
from ..core.renderer import STYLE_DEFAULT

_XMLDECL_BG = 0xF0F0F0

MARKUP_STYLES = slots(
    ("html_default", style(0x000000)),
    ("html_tag", style(0x000099)),
    ("html_tagunknown", style(0xFF0000)),
    ("html_attribute", style(0x007F00)),
    ("html_attributeunknown", style(0xFF0000)),
    ("html_number", style(0x800080)),
    ("html_doublestring", style(0xFF901E)),
    ("html_singlestring", style(0xFF901E)),
    ("html_other", style(0x800080)),
    ("html_comment", style(0x808080)),
    ("html_entity", style(0x800080)),
    ("html_tagend", style(0x000080)),
    ("html_xmlstart", style(0x000099, _XMLDECL_BG)),
    ("html_xmlend", style(0x000099, _XMLDECL_BG)),
    ("html_script", style(0x000080, _XMLDECL_BG)),
    ("html_asp", style(0x004F4F, _XMLDECL_BG)),
    ("html_aspat", style(0x004F4F, _XMLDECL_BG)),
    ("html_cdata", style(0x660099)),
    ("html_question", style(0x0000FF)),
    ("html_value", style(0x660099)),
    ("html_xccomment", style(0x660099)),

    ("sgml_default", style(0x000000)),
    ("sgml_comment", style(0x808080)),
    ("sgml_special", style(0x007F00)),
    ("sgml_command", style(0x111199, bold=True)),
    ("sgml_doublestring", style(0xFF901E)),
    ("sgml_simplestring", style(0xFF901E)),
    ("sgml_1st_param", style(0x404080)),
    ("sgml_entity", style(0x301010)),
    ("sgml_block_default", style(0x000000)),
    ("sgml_1st_param_comment", style(0x406090)),
    ("sgml_error", style(0xFF0000)),

    ("php_default", style(0x000000)),
    ("php_simplestring", style(0x008000)),
    ("php_hstring", style(0x008000)),
    ("php_number", style(0x606000)),
    ("php_word", style(0x000099)),
    ("php_variable", style(0x7F0000)),
    ("php_comment", style(0x808080)),
    ("php_commentline", style(0x808080)),
    ("php_operator", style(0x102060)),
    ("php_hstring_variable", style(0x101060)),
    ("php_complex_variable", style(0x105010)),

    ("jscript_start", style(0x008080)),
    ("jscript_default", style(0x000000)),
    ("jscript_comment", style(0xD00000)),
    ("jscript_commentline", style(0xD00000)),
    ("jscript_commentdoc", style(0x3F5FBF, bold=True)),
    ("jscript_number", style(0x007F00)),
    ("jscript_word", style(0x000000)),
    ("jscript_keyword", style(0x00007F, bold=True)),
    ("jscript_doublestring", style(0xFF901E)),
    ("jscript_singlestring", style(0xFF901E)),
    ("jscript_symbols", style(0x301010)),
    ("jscript_stringeol", style(0x000000, 0xE0C0E0)),
)

# Slot numbers of the script sub-tables
JS_START, JS_DEFAULT, JS_COMMENT, JS_COMMENTLINE, JS_COMMENTDOC, JS_NUMBER, \
    JS_WORD, JS_KEYWORD, JS_DOUBLESTRING, JS_SINGLESTRING, JS_SYMBOLS, \
    JS_STRINGEOL = range(43, 55)

_HTML_AND_SGML = [(STYLE_DEFAULT, 0)] + [(style_id, style_id) for style_id in range(12)] + [
    (12, 12),  # xmlstart
    (13, 13),  # xmlend
    (14, 14),  # script
    (15, 15),  # asp
    (16, 16),  # aspat
    (17, 17),  # cdata
    (18, 18),  # question
    (19, 19),  # value
    (20, 20),  # xccomment
    (21, 21),  # sgml default
    (29, 22),  # sgml comment
    (27, 23),  # sgml special
    (22, 24),  # sgml command
    (24, 25),  # sgml double string
    (25, 26),  # sgml simple string
    (23, 27),  # sgml 1st param
    (28, 28),  # sgml entity
    (31, 29),  # sgml block default
    (30, 30),  # sgml 1st param comment
    (26, 31),  # sgml error
]

# JavaScript (40..51) and ASP JavaScript (55..66) share one sub-table
_JAVASCRIPT = [
    (base + offset, slot)
    for base in (40, 55)
    for offset, slot in enumerate((
        JS_START, JS_DEFAULT, JS_COMMENT, JS_COMMENTLINE, JS_COMMENTDOC, JS_NUMBER,
        JS_WORD, JS_KEYWORD, JS_DOUBLESTRING, JS_SINGLESTRING, JS_SYMBOLS,
        JS_STRINGEOL,
    ))
]

# VBScript (70..77) and ASP VBScript (80..87) borrow the JavaScript colours
_VBSCRIPT = [
    (base + offset, slot)
    for base in (70, 80)
    for offset, slot in enumerate((
        JS_START, JS_DEFAULT, JS_COMMENTLINE, JS_NUMBER, JS_WORD, JS_DOUBLESTRING,
        JS_SYMBOLS, JS_STRINGEOL,
    ))
]

_PHP = [
    (118, 32),  # default
    (120, 33),  # simple string
    (119, 34),  # hstring
    (122, 35),  # number
    (121, 36),  # word
    (123, 37),  # variable
    (124, 38),  # comment
    (125, 39),  # commentline
    (127, 40),  # operator
    (126, 41),  # hstring variable
    (104, 42),  # complex variable
]

# Embedded Python (90..102) and ASP Python (105..117): start marker from the
# markup table, the rest straight from the Python table's first 12 slots
_PYTHON_START = [(90, JS_START), (105, JS_START)]
_PYTHON_BODY = [
    (base + 1 + slot, slot)
    for base in (90, 105)
    for slot in range(12)
]

MARKUP_STYLE_MAP = (
    bindings(_HTML_AND_SGML + _JAVASCRIPT + _VBSCRIPT + _PHP + _PYTHON_START,
             source=Filetype.XML)
    + bindings(_PYTHON_BODY, source=Filetype.PYTHON)
)

MARKUP_PROPERTIES = (
    ("fold.html", "1"),
    ("fold.html.preprocessor", "1"),
)

MARKUP_KEYWORDS = (
    KeywordClass(
        "html",
        "a abbr acronym address applet area b base basefont bdo big blockquote body br "
        "button caption center cite code col colgroup dd del dfn dir div dl dt em embed "
        "fieldset font form frame frameset h1 h2 h3 h4 h5 h6 head hr html i iframe img "
        "input ins isindex kbd label legend li link map menu meta noframes noscript "
        "object ol optgroup option p param pre q quality s samp script select small "
        "span strike strong style sub sup table tbody td textarea tfoot th thead title "
        "tr tt u ul var xmlns leftmargin topmargin abbr accept-charset accept accesskey "
        "action align alink alt archive axis background bgcolor border cellpadding "
        "cellspacing char charoff charset checked cite class classid clear codebase "
        "codetype color cols colspan compact content coords data datafld dataformatas "
        "datapagesize datasrc datetime declare defer dir disabled enctype face for "
        "frame frameborder selected headers height href hreflang hspace http-equiv id "
        "ismap label lang language link longdesc marginwidth marginheight maxlength "
        "media framespacing method multiple name nohref noresize noshade nowrap object "
        "onblur onchange onclick ondblclick onfocus onkeydown onkeypress onkeyup onload "
        "onmousedown onmousemove onmouseover onmouseout onmouseup onreset onselect "
        "onsubmit onunload profile prompt pluginspage readonly rel rev rows rowspan "
        "rules scheme scope scrolling shape size span src standby start style summary "
        "tabindex target text title type usemap valign value valuetype version vlink "
        "vspace width text password checkbox radio submit reset file hidden image "
        "public doctype xml",
    ),
    KeywordClass(
        "javascript",
        "abs abstract acos anchor asin atan atan2 big bold boolean break byte case catch "
        "ceil char charAt charCodeAt class concat const continue cos Date debugger "
        "default delete do double else enum escape eval exp export extends false final "
        "finally fixed float floor fontcolor fontsize for fromCharCode function goto if "
        "implements import in indexOf Infinity instanceof int interface isFinite isNaN "
        "italics join lastIndexOf length link log long Math max MAX_VALUE min MIN_VALUE "
        "NaN native NEGATIVE_INFINITY new null Number package parseFloat parseInt pop "
        "POSITIVE_INFINITY pow private protected public push random return reverse "
        "round shift short sin slice small sort splice split sqrt static strike string "
        "String sub substr substring sup super switch synchronized tan this throw "
        "throws toLowerCase toString toUpperCase transient true try typeof undefined "
        "unescape unshift valueOf var void volatile while with",
    ),
    KeywordClass(
        "vbscript",
        "and as byref byval case call const continue dim do each else elseif end error "
        "exit false for function global goto if in loop me new next not nothing on "
        "optional or private public redim rem resume select set sub then to true type "
        "while with boolean byte currency date double integer long object single "
        "string type variant",
    ),
    KeywordClass(
        "python",
        "and as assert break class continue def del elif else except exec finally for "
        "from global if import in is lambda not or pass print raise return try while "
        "with yield False None True",
    ),
    KeywordClass(
        "php",
        "abstract and array as bool boolean break case catch cfunction __class__ class "
        "clone const continue declare default die directory do double echo else elseif "
        "empty enddeclare endfor endforeach endif endswitch endwhile eval exception exit "
        "extends false __file__ final float for foreach __function__ function global if "
        "implements include include_once int integer interface isset __line__ list "
        "__method__ new null object old_function or parent php_user_filter print "
        "private protected public real require require_once resource return __sleep "
        "static stdclass string switch this throw true try unset use var __wakeup while "
        "xor",
    ),
    KeywordClass("sgml", "ELEMENT DOCTYPE ATTLIST ENTITY NOTATION"),
)

# Plain XML only needs the SGML keywords
_XML_KEYWORD_MAP = (KeywordBinding(5, 5, source=Filetype.XML),)
_MARKUP_KEYWORD_MAP = keyword_bindings(0, 1, 2, 3, 4, 5, source=Filetype.XML)

XML = LanguageCatalog(
    filetype=Filetype.XML,
    lexer="xml",
    styles=MARKUP_STYLES,
    keywords=MARKUP_KEYWORDS,
    style_map=MARKUP_STYLE_MAP,
    keyword_map=_XML_KEYWORD_MAP,
    properties=MARKUP_PROPERTIES,
    embeds=(Filetype.PYTHON,),
)

HTML = LanguageCatalog(
    filetype=Filetype.HTML,
    lexer="hypertext",
    style_map=MARKUP_STYLE_MAP,
    keyword_map=_MARKUP_KEYWORD_MAP,
    properties=MARKUP_PROPERTIES,
    embeds=(Filetype.XML, Filetype.PYTHON),
)

PHP = LanguageCatalog(
    filetype=Filetype.PHP,
    lexer="hypertext",
    style_map=MARKUP_STYLE_MAP,
    keyword_map=_MARKUP_KEYWORD_MAP,
    properties=(("phpscript.mode", "1"),) + MARKUP_PROPERTIES,
    embeds=(Filetype.XML, Filetype.PYTHON),
)


_DOCBOOK_STYLES = slots(
    ("default", style(0x000000)),
    ("tag", style(0x000099)),
    ("tagunknown", style(0xFF0000)),
    ("attribute", style(0x007F00)),
    ("attributeunknown", style(0xFF0000)),
    ("number", style(0x800080)),
    ("doublestring", style(0xFF901E)),
    ("singlestring", style(0xFF901E)),
    ("other", style(0x800080)),
    ("comment", style(0x808080)),
    ("entity", style(0x800080)),
    ("tagend", style(0x000099)),
    ("xmlstart", style(0x000099)),
    ("xmlend", style(0x000099, _XMLDECL_BG)),
    ("cdata", style(0x660099)),
    ("question", style(0x0000FF)),
    ("value", style(0x660099)),
    ("xccomment", style(0x660099)),
    ("sgml_default", style(0x000000)),
    ("sgml_comment", style(0x303030)),
    ("sgml_special", style(0x007F00)),
    ("sgml_command", style(0x111199, bold=True)),
    ("sgml_doublestring", style(0xFF901E)),
    ("sgml_simplestring", style(0x404000)),
    ("sgml_1st_param", style(0x404080)),
    ("sgml_entity", style(0x301010)),
    ("sgml_block_default", style(0x000000)),
    ("sgml_1st_param_comment", style(0x406090)),
    ("sgml_error", style(0xFF0000)),
)

_DOCBOOK_STYLE_MAP = bindings(
    [(STYLE_DEFAULT, 0)] + [(style_id, style_id) for style_id in range(14)] + [
        (17, 14),  # cdata
        (18, 15),  # question
        (19, 16),  # value
        (20, 17),  # xccomment
        (21, 18),  # sgml default
        (29, 19),  # sgml comment
        (27, 20),  # sgml special
        (22, 21),  # sgml command
        (24, 22),  # sgml double string
        (25, 23),  # sgml simple string
        (23, 24),  # sgml 1st param
        (28, 25),  # sgml entity
        (31, 26),  # sgml block default
        (30, 27),  # sgml 1st param comment
        (26, 28),  # sgml error
    ]
)

DOCBOOK = LanguageCatalog(
    filetype=Filetype.DOCBOOK,
    lexer="xml",
    styles=_DOCBOOK_STYLES,
    keywords=(
        KeywordClass(
            "elements",
            "abbrev abstract accel ackno acronym action address affiliation alt anchor "
            "answer appendix appendixinfo application area areaset areaspec arg article "
            "articleinfo artpagenums attribution audiodata audioobject author "
            "authorblurb authorgroup authorinitials beginpage bibliocoverage bibliodiv "
            "biblioentry bibliography bibliographyinfo biblioid bibliomisc bibliomixed "
            "bibliomset bibliorelation biblioset bibliosource blockinfo blockquote book "
            "bookinfo bridgehead callout calloutlist caption caution chapter "
            "chapterinfo citation citebiblioid citerefentry citetitle city classname "
            "classsynopsis classsynopsisinfo cmdsynopsis co collab collabname colophon "
            "nameend namest colname colspec command computeroutput confdates confgroup "
            "confnum confsponsor conftitle constant constraint constraintdef "
            "constructorsynopsis contractnum contractsponsor contrib copyright coref "
            "corpauthor corpname country database date dedication destructorsynopsis "
            "edition editor email emphasis entry entrytbl envar epigraph equation "
            "errorcode errorname errortext errortype example exceptionname fax "
            "fieldsynopsis figure filename fileref firstname firstterm footnote "
            "footnoteref foreignphrase formalpara frame funcdef funcparams "
            "funcprototype funcsynopsis funcsynopsisinfo function glossary "
            "glossaryinfo glossdef glossdiv glossentry glosslist glosssee glossseealso "
            "glossterm graphic graphicco group guibutton guiicon guilabel guimenu "
            "guimenuitem guisubmenu hardware highlights holder honorific imagedata "
            "imageobject imageobjectco important index indexdiv indexentry indexinfo "
            "indexterm informalequation informalexample informalfigure informaltable "
            "initializer inlineequation inlinegraphic inlinemediaobject interface "
            "interfacename invpartnumber isbn issn issuenum itemizedlist itermset "
            "jobtitle keycap keycode keycombo keysym keyword keywordset label "
            "legalnotice lhs lineage lineannotation link listitem literal "
            "literallayout lot lotentry manvolnum markup medialabel mediaobject "
            "mediaobjectco member menuchoice methodname methodparam methodsynopsis mm "
            "modespec modifier mousebutton msg msgaud msgentry msgexplan msginfo "
            "msglevel msgmain msgorig msgrel msgset msgsub msgtext nonterminal note "
            "objectinfo olink ooclass ooexception oointerface option optional "
            "orderedlist orgdiv orgname otheraddr othercredit othername pagenums para "
            "paramdef parameter part partinfo partintro personblurb personname phone "
            "phrase pob postcode preface prefaceinfo primary primaryie printhistory "
            "procedure production productionrecap productionset productname "
            "productnumber programlisting programlistingco prompt property pubdate "
            "publisher publishername pubsnumber qandadiv qandaentry qandaset question "
            "quote refclass refdescriptor refentry refentryinfo refentrytitle "
            "reference referenceinfo refmeta refmiscinfo refname refnamediv refpurpose "
            "refsect1 refsect1info refsect2 refsect2info refsect3 refsect3info "
            "refsection refsectioninfo refsynopsisdiv refsynopsisdivinfo releaseinfo "
            "remark replaceable returnvalue revdescription revhistory revision "
            "revnumber revremark rhs row sbr screen screenco screeninfo screenshot "
            "secondary secondaryie sect1 sect1info sect2 sect2info sect3 sect3info "
            "sect4 sect4info sect5 sect5info section sectioninfo see seealso seealsoie "
            "seeie seg seglistitem segmentedlist segtitle seriesvolnums set setindex "
            "setindexinfo setinfo sgmltag shortaffil shortcut sidebar sidebarinfo "
            "simpara simplelist simplemsgentry simplesect spanspec state step street "
            "structfield structname subject subjectset subjectterm subscript substeps "
            "subtitle superscript surname sv symbol synopfragment synopfragmentref "
            "synopsis systemitem table tbody term tertiary tertiaryie textdata "
            "textobject tfoot tgroup thead tip title titleabbrev toc tocback tocchap "
            "tocentry tocfront toclevel1 toclevel2 toclevel3 toclevel4 toclevel5 "
            "tocpart token trademark type ulink userinput varargs variablelist "
            "varlistentry varname videodata videoobject void volumenum warning "
            "wordasword xref year cols colnum align spanname arch condition "
            "conformance id lang os remap role revisionflag security userlevel url "
            "vendor xreflabel status endterm linkend space width",
        ),
        KeywordClass("dtd", "ELEMENT DOCTYPE ATTLIST ENTITY NOTATION"),
    ),
    style_map=_DOCBOOK_STYLE_MAP,
    # element names feed the html class, DTD words the sgml class
    keyword_map=(KeywordBinding(0, 0), KeywordBinding(5, 1)),
    properties=MARKUP_PROPERTIES,
)

CATALOGS = (XML, HTML, PHP, DOCBOOK)
