"""Constants for markdown parsing (private)."""

# Link kinds produced by the extractor
LINK_KIND_INLINE = "inline"
LINK_KIND_IMAGE = "image"
LINK_KIND_REFERENCE = "reference"

# Targets with one of these schemes never touch the local filesystem
FILE_SCHEME = "file"

# Longest heading level recognized by ATX syntax
MAX_HEADING_LEVEL = 6
