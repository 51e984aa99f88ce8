"""Constants shared across tablemorph."""


class Constants:
    """Project-wide constants."""

    # Substitution table syntax
    TABLE_SEPARATOR = b"="
    TABLE_COMMENT = b"#"
    HEX_PREFIX = b"$HEX["
    HEX_SUFFIX = b"]"
    HEX_MIN_LENGTH = 7  # len("$HEX[") + len("]") + one hex byte

    # Substitution bounds
    DEFAULT_MIN_SUBSTITUTIONS = 0
    DEFAULT_MAX_SUBSTITUTIONS = 15

    # Thread count meaning "use every core"
    ALL_CORES = -1

    # Output channel between workers and the sink
    OUTPUT_QUEUE_SIZE = 1000
    OUTPUT_BATCH_SIZE = 512
    LINE_TERMINATOR = b"\n"
