class Defaults:
    DTO_NAMESPACE = "app.dto"
    OUTPUT_SUBPATH = "resources/typescript"
    FILENAME = "dtos.ts"
    CONFIG_FILENAME = "validated_dto.toml"


class TypeScript:
    ANY = "any"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ANY_ARRAY = "any[]"
    OBJECT = "object"
    INTERFACE_SUFFIX = "Interface"
    STRIPPED_CLASS_SUFFIX = "DTO"
    INDENT = "  "
    HEADER_LINES: tuple[str, ...] = (
        "// Generated TypeScript interfaces from DTO classes",
        "// Generated at: {generated_at}",
        "// This file is auto-generated. Do not edit manually.",
    )
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
