"""Test fixtures for treevisit consumers.

These fixtures provide small, realistic ESTree trees and a recorder for
visitor calls, so projects built on treevisit can test their visitors
without depending on a JavaScript parser.
"""

from typing import Any, Dict, List, Optional, Tuple

# Source of the tree returned by ``sample_program``
SAMPLE_SOURCE = 'export function x() { console.log(1 + "2"); process.exit(1) }'

# Node types of ``sample_program`` in the order enter sees them
SAMPLE_PREORDER = [
    "Program",
    "ExportNamedDeclaration",
    "FunctionDeclaration",
    "Identifier",
    "BlockStatement",
    "ExpressionStatement",
    "CallExpression",
    "MemberExpression",
    "Identifier",
    "Identifier",
    "BinaryExpression",
    "Literal",
    "Literal",
    "ExpressionStatement",
    "CallExpression",
    "MemberExpression",
    "Identifier",
    "Identifier",
    "Literal",
]

# Node types of ``sample_program`` in the order leave sees them
SAMPLE_POSTORDER = [
    "Identifier",
    "Identifier",
    "Identifier",
    "MemberExpression",
    "Literal",
    "Literal",
    "BinaryExpression",
    "CallExpression",
    "ExpressionStatement",
    "Identifier",
    "Identifier",
    "MemberExpression",
    "Literal",
    "CallExpression",
    "ExpressionStatement",
    "BlockStatement",
    "FunctionDeclaration",
    "ExportNamedDeclaration",
    "Program",
]


def _identifier(start: int, end: int, name: str) -> Dict[str, Any]:
    return {"type": "Identifier", "start": start, "end": end, "name": name}


def _literal(start: int, end: int, value: Any, raw: str) -> Dict[str, Any]:
    return {"type": "Literal", "start": start, "end": end, "value": value, "raw": raw}


def _member(start: int, end: int, obj: Dict[str, Any], prop: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "MemberExpression",
        "start": start,
        "end": end,
        "object": obj,
        "property": prop,
        "computed": False,
        "optional": False,
    }


def _call(start: int, end: int, callee: Dict[str, Any], args: List[Any]) -> Dict[str, Any]:
    return {
        "type": "CallExpression",
        "start": start,
        "end": end,
        "callee": callee,
        "arguments": args,
        "optional": False,
    }


def sample_program() -> Dict[str, Any]:
    """Return a fresh ESTree module for ``SAMPLE_SOURCE``.

    The tree has the field layout a JavaScript parser emits, including
    scalar fields and ``None`` values the traverser must pass over. It
    holds 19 nodes; see ``SAMPLE_PREORDER`` and ``SAMPLE_POSTORDER``.
    """
    log_call = _call(
        22, 42,
        _member(22, 33, _identifier(22, 29, "console"), _identifier(30, 33, "log")),
        [{
            "type": "BinaryExpression",
            "start": 34,
            "end": 41,
            "left": _literal(34, 35, 1, "1"),
            "operator": "+",
            "right": _literal(38, 41, "2", '"2"'),
        }],
    )
    exit_call = _call(
        44, 59,
        _member(44, 56, _identifier(44, 51, "process"), _identifier(52, 56, "exit")),
        [_literal(57, 58, 1, "1")],
    )
    function = {
        "type": "FunctionDeclaration",
        "start": 7,
        "end": 61,
        "id": _identifier(16, 17, "x"),
        "expression": False,
        "generator": False,
        "async": False,
        "params": [],
        "body": {
            "type": "BlockStatement",
            "start": 20,
            "end": 61,
            "body": [
                {"type": "ExpressionStatement", "start": 22, "end": 43, "expression": log_call},
                {"type": "ExpressionStatement", "start": 44, "end": 59, "expression": exit_call},
            ],
        },
    }
    return {
        "type": "Program",
        "start": 0,
        "end": 61,
        "body": [{
            "type": "ExportNamedDeclaration",
            "start": 0,
            "end": 61,
            "declaration": function,
            "specifiers": [],
            "source": None,
        }],
        "sourceType": "module",
    }


def array_expression(*values: int) -> Dict[str, Any]:
    """Return an ESTree ``ArrayExpression`` for ``[v1, v2, ...]``.

    Offsets match the source text ``[1, 2, 3, 4]`` style layout: one
    character per value, separated by ``", "``.

    Example:
        >>> array_expression(1, 2)["elements"][1]["value"]
        2
    """
    elements = []
    offset = 1
    for value in values:
        raw = str(value)
        elements.append(_literal(offset, offset + len(raw), value, raw))
        offset += len(raw) + 2
    end = offset - 1 if values else 2
    return {"type": "ArrayExpression", "start": 0, "end": end, "elements": elements}


class CallRecorder:
    """Visitor that records every call it receives.

    Pass it straight to ``visit``; it exposes ``enter`` and ``leave``.
    Optional ``results`` map a node type to what the callback should
    return for nodes of that type.

    Example:
        recorder = CallRecorder(enter_results={"CallExpression": EXIT})
        visit(tree, recorder)
        assert recorder.entered_types()[-1] == "CallExpression"
    """

    def __init__(self,
                 enter_results: Optional[Dict[str, Any]] = None,
                 leave_results: Optional[Dict[str, Any]] = None):
        self.enter_results = enter_results or {}
        self.leave_results = leave_results or {}
        self.calls: List[Tuple[str, Any, Optional[str], Optional[int], List[Any]]] = []

    def enter(self, node, key, index, ancestors):
        self.calls.append(("enter", node, key, index, ancestors))
        return self.enter_results.get(node["type"])

    def leave(self, node, key, index, ancestors):
        self.calls.append(("leave", node, key, index, ancestors))
        return self.leave_results.get(node["type"])

    def entered_types(self) -> List[str]:
        """Types of the nodes entered, in call order."""
        return [call[1]["type"] for call in self.calls if call[0] == "enter"]

    def left_types(self) -> List[str]:
        """Types of the nodes left, in call order."""
        return [call[1]["type"] for call in self.calls if call[0] == "leave"]

    def events(self) -> List[Tuple[str, str]]:
        """``(phase, type)`` pairs in call order."""
        return [(call[0], call[1]["type"]) for call in self.calls]
