"""Constants for VB6 file parsing."""

SOURCE_ENCODING = "cp1252"

PROJECT_TYPES = frozenset({"Exe", "OleDll", "Control", "OleExe"})

SUB_PROJECT_PREFIX = "*\\A"
COMPILED_REFERENCE_PREFIX = "*\\G"

# Keys naming files that belong to the project but have no dedicated check
OTHER_MEMBER_KEYS = frozenset({"UserControl", "UserDocument", "PropertyPage", "Designer", "RelatedDoc", "ResFile32"})
