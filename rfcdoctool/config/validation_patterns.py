# Line-level recognizers shared by every transform. Patterns that are applied
# to a whole document are compiled with re.MULTILINE by the pattern cache.

# Section notations
SECTION_PATTERNS = {
    # "INTRODUCTION", "MAIN SECTION", "SEE-ALSO"; no colon, so metadata never matches
    "uppercase": r"^(?P<title>[A-Z](?:[A-Z \-]*[A-Z])?)[ \t]*$",
    # "2.1. Title", "1. Title", or the dot-less "2.1 Title" form
    "numbered": (
        r"^(?:(?P<number>\d+(?:\.\d+)*)\.|(?P<bare>\d+(?:\.\d+)+)(?=[ \t]+[A-Z]))"
        r"[ \t]+(?P<title>\S.*?)[ \t]*$"
    ),
    # ": Title"
    "alternative": r"^:[ \t]+(?P<title>\S.*?)[ \t]*$",
}

# "Author        John Doe"
METADATA_PATTERN = r"^(?P<key>[A-Za-z][A-Za-z0-9 ]*?)[ \t]{2,}(?P<value>\S.*?)[ \t]*$"

# Title underline and TOC underline
UNDERLINE_PATTERN = r"^-{3,}[ \t]*$"

# List items
LIST_PATTERNS = {
    "bullet": r"^(?P<indent>[ \t]*)(?P<marker>[-*])(?P<rest>[ \t]+\S.*)$",
    "ordered": (
        r"^(?P<indent>[ \t]*)"
        r"(?P<marker>\d+|[A-Za-z]"
        r"|(?=[ivxlcdm])m{0,3}(?:cm|cd|d?c{0,3})(?:xc|xl|l?x{0,3})(?:ix|iv|v?i{0,3})"
        r"|(?=[IVXLCDM])M{0,3}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3}))"
        r"\.(?P<rest>[ \t]+\S.*)$"
    ),
}

ROMAN_NUMERAL_PATTERN = (
    r"^(?:(?=[ivxlcdm])m{0,3}(?:cm|cd|d?c{0,3})(?:xc|xl|l?x{0,3})(?:ix|iv|v?i{0,3})"
    r"|(?=[IVXLCDM])M{0,3}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3}))$"
)

# Block-level prefixes
CODE_BLOCK_PATTERN = r"^(?: {4}|\t)"
QUOTE_PATTERN = r"^>+(?:[ \t]|$)"

# Footnotes
FOOTNOTE_PATTERNS = {
    "declaration": r"^\[(?P<number>\d+)\] (?P<text>.+)$",
    "token": r"\[(?P<number>\d+)\]",
}

# Cross-document references: "see: other.rfc#section-2-1"
DOCUMENT_REFERENCE_PATTERN = r"see:\s+(?P<path>[^#\s]+)(?:#(?P<anchor>[A-Za-z0-9-]+))?"

# Characters stripped from the end of a referenced path
REFERENCE_TRAILING_PUNCTUATION = ".,;:!?)]}'\""

# All named patterns, keyed by the names used with PatternCache.get()
NAMED_PATTERNS = {
    "section.uppercase": SECTION_PATTERNS["uppercase"],
    "section.numbered": SECTION_PATTERNS["numbered"],
    "section.alternative": SECTION_PATTERNS["alternative"],
    "metadata": METADATA_PATTERN,
    "underline": UNDERLINE_PATTERN,
    "list.bullet": LIST_PATTERNS["bullet"],
    "list.ordered": LIST_PATTERNS["ordered"],
    "roman": ROMAN_NUMERAL_PATTERN,
    "code_block": CODE_BLOCK_PATTERN,
    "quote": QUOTE_PATTERN,
    "footnote.declaration": FOOTNOTE_PATTERNS["declaration"],
    "footnote.token": FOOTNOTE_PATTERNS["token"],
    "reference": DOCUMENT_REFERENCE_PATTERN,
}

# Patterns searched across a whole document rather than a single line
MULTILINE_PATTERNS = {"footnote.declaration"}
