"""
Core schema representation for code generation.

Holds the element tree produced by the schema parser in a normalized
form that generators can walk consistently.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Tuple


# Types the target language already provides natively
PRIMITIVE_TYPES = frozenset({"bool", "string", "int", "float64", "time.Time"})


@dataclass(eq=False)
class SchemaNode:
    """A single element or attribute definition from the schema tree."""

    name: str
    type: str = ""
    attribs: List["SchemaNode"] = field(default_factory=list)
    children: List["SchemaNode"] = field(default_factory=list)

    # Element repeats (rendered as a slice)
    list: bool = False

    # Element carries character data
    cdata: bool = False

    def __post_init__(self):
        """An untyped element is an instance of its own declared type."""
        if not self.type:
            self.type = self.name

    @property
    def is_primitive(self) -> bool:
        """True when the node is inlined as a scalar field in its parent."""
        return is_primitive(self)

    def shape(self) -> Tuple:
        """
        Return a comparable summary of this node's own declaration.

        Two nodes with the same shape render to the same struct. Only the
        direct attributes and children are compared, not their subtrees.
        """
        return (
            self.type,
            self.cdata,
            tuple((a.name, a.type) for a in self.attribs),
            tuple((c.name, c.type, c.list, c.cdata) for c in self.children),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchemaNode":
        """
        Build a node (and its subtree) from a decoded JSON object.

        Args:
            data: Mapping with ``name`` and optional ``type``, ``attribs``,
                ``children``, ``list`` and ``cdata`` keys

        Returns:
            The root SchemaNode of the subtree

        Raises:
            ValueError: If the mapping is not a valid node description
        """
        if not isinstance(data, dict):
            raise ValueError(f"Schema node must be an object, got {type(data).__name__}")

        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Schema node is missing a name: {data!r}")

        node_type = data.get("type") or name
        if not isinstance(node_type, str):
            raise ValueError(f"Type of '{name}' must be a string")

        attribs = []
        for attrib in data.get("attribs") or []:
            if not isinstance(attrib, dict) or not attrib.get("name"):
                raise ValueError(f"Invalid attribute on '{name}': {attrib!r}")
            attribs.append(
                cls(name=attrib["name"], type=attrib.get("type") or "string")
            )

        children = [cls.from_dict(child) for child in data.get("children") or []]

        return cls(
            name=name,
            type=node_type,
            attribs=attribs,
            children=children,
            list=bool(data.get("list", False)),
            cdata=bool(data.get("cdata", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the node and its subtree to a JSON-compatible dict."""
        result: Dict[str, Any] = {"name": self.name, "type": self.type}
        if self.attribs:
            result["attribs"] = [{"name": a.name, "type": a.type} for a in self.attribs]
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        if self.list:
            result["list"] = True
        if self.cdata:
            result["cdata"] = True
        return result


def is_primitive(node: SchemaNode) -> bool:
    """
    Check whether a node is inlined rather than declared.

    Character data always needs a dedicated struct, even when the
    element's type is a built-in.
    """
    if node.cdata:
        return False
    return node.type in PRIMITIVE_TYPES


def parse_schema_tree(data: Any) -> List[SchemaNode]:
    """
    Convert a decoded schema document into root nodes.

    Args:
        data: A single node object or a list of node objects

    Returns:
        List of root SchemaNodes in document order
    """
    if isinstance(data, dict):
        if "roots" in data:
            data = data["roots"]
        else:
            return [SchemaNode.from_dict(data)]

    if not isinstance(data, list):
        raise ValueError(
            f"Schema document must be an object or a list, got {type(data).__name__}"
        )

    return [SchemaNode.from_dict(item) for item in data]


def count_nodes(roots: List[SchemaNode]) -> int:
    """Count element nodes reachable from the roots (attributes excluded)."""
    total = 0
    stack = list(roots)
    seen = set()
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        total += 1
        stack.extend(node.children)
    return total
