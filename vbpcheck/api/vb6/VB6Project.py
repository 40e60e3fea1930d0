"""Parsed VB6 project file (.vbp)."""

from dataclasses import dataclass, field

from ._constants import OTHER_MEMBER_KEYS, PROJECT_TYPES
from .parse_source import parse_source
from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError
from .VB6ProjectMember import VB6ProjectMember
from .VB6ProjectReference import VB6ProjectReference


@dataclass(frozen=True)
class VB6Project:
    """The members and settings listed by a project file.

    Only the leading ``key=value`` block is read; bracketed sections that
    follow it hold add-in settings and are ignored.
    """

    project_type: str
    references: list[VB6ProjectReference] = field(default_factory=list)
    objects: list[str] = field(default_factory=list)
    classes: list[VB6ProjectMember] = field(default_factory=list)
    modules: list[VB6ProjectMember] = field(default_factory=list)
    forms: list[str] = field(default_factory=list)
    other_members: list[tuple[str, str]] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.properties.get("Name", "")

    @property
    def sub_project_references(self) -> list[VB6ProjectReference]:
        return [reference for reference in self.references if reference.is_sub_project]

    @classmethod
    def parse(cls, file_name: str, contents: bytes) -> "VB6Project":
        """Parse project file bytes.

        Raises:
            VB6ParseError: If a line is not ``key=value``, the project type is
                missing or unknown, or a reference/member entry is malformed.
        """
        return parse_source(file_name, contents, cls._parse_lines)

    @classmethod
    def _parse_lines(cls, file_name: str, lines: list[str]) -> "VB6Project":
        project_type = ""
        references: list[VB6ProjectReference] = []
        objects: list[str] = []
        classes: list[VB6ProjectMember] = []
        modules: list[VB6ProjectMember] = []
        forms: list[str] = []
        other_members: list[tuple[str, str]] = []
        properties: dict[str, str] = {}

        for line_number, line in enumerate(lines, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            if stripped.startswith("["):
                break

            key, sep, value = stripped.partition("=")
            key = key.strip()
            value = value.strip()
            if not sep or not key:
                raise VB6ParseError(file_name, VB6ErrorKind.NO_EQUAL_SPLIT, line_number, stripped)

            if key == "Type":
                if value not in PROJECT_TYPES:
                    raise VB6ParseError(file_name, VB6ErrorKind.PROJECT_TYPE_UNKNOWN, line_number, value)
                project_type = value
            elif key == "Reference":
                references.append(VB6ProjectReference.parse(file_name, value, line_number))
            elif key == "Object":
                objects.append(value)
            elif key == "Class":
                classes.append(VB6ProjectMember.parse(file_name, value, line_number))
            elif key == "Module":
                modules.append(VB6ProjectMember.parse(file_name, value, line_number))
            elif key == "Form":
                forms.append(value)
            elif key in OTHER_MEMBER_KEYS:
                other_members.append((key, value.strip('"')))
            else:
                properties[key] = value.strip('"')

        if not project_type:
            raise VB6ParseError(file_name, VB6ErrorKind.PROJECT_TYPE_MISSING)

        return cls(
            project_type=project_type,
            references=references,
            objects=objects,
            classes=classes,
            modules=modules,
            forms=forms,
            other_members=other_members,
            properties=properties,
        )
