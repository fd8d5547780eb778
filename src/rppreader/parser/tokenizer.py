"""
Line tokenization for RPP blocks.

A line is a tag followed by space-separated parameters. Double-quoted
parameters may contain spaces and escaped quotes. Parameters that look
like numbers are coerced once, here, and never reinterpreted later.
"""

from typing import Callable, List, Tuple

from ..ast.node import RPPNode, NodeType, ParamValue
from ..constants import ParserConstants
from .blocks import BlockTable, ref_index


def coerce(token: str) -> ParamValue:
    """Convert a token to float or int when its lexical shape says so."""
    if ParserConstants.FLOAT_TOKEN.match(token):
        return float(token)
    if ParserConstants.INT_TOKEN.match(token):
        return int(token)
    return token


def unquote(quoted: str) -> str:
    """Strip surrounding quotes and restore escaped inner quotes."""
    return quoted[1:-1].replace('\\"', '"')


class Tokenizer:
    """
    Turns block texts and lines into nodes.

    Every node produced is appended to ``index`` as it is built, so the
    index ends up holding every line of the document in document order.
    """

    def __init__(self, table: BlockTable, index: List[RPPNode]):
        self.table = table
        self.index = index

    def split_params(self, line: str) -> Tuple[str, List[ParamValue]]:
        """
        Split a line into its tag and typed parameters.

        Args:
            line: One line of a block, without a leading "<"

        Returns:
            (tag, params) tuple
        """
        quoted: List[str] = []

        def protect(match) -> str:
            text = match.group(0)
            if text not in quoted:
                quoted.append(text)
            return ParserConstants.quote_ref(quoted.index(text))

        protected = ParserConstants.QUOTED.sub(protect, line)
        tokens = []
        for token in protected.split(" "):
            match = ParserConstants.QUOTE_REF.fullmatch(token)
            if match:
                token = unquote(quoted[int(match.group(1))])
            else:
                # Quotes glued to other text keep their quote characters
                token = ParserConstants.QUOTE_REF.sub(
                    lambda m: quoted[int(m.group(1))], token
                )
            tokens.append(self.table.expand(token))

        tag = tokens[0]
        return tag, [coerce(token) for token in tokens[1:]]

    def tokenize_line(self, line: str) -> RPPNode:
        """Build a leaf node from a plain attribute line."""
        tag, params = self.split_params(line)
        node = RPPNode(node_type=NodeType.LINE, tag=tag, params=params)
        self.index.append(node)
        return node

    def split_block(self, text: str) -> Tuple[str, List[str]]:
        """
        Split raw block text into its header and body lines.

        The closing ">" line is dropped and the header loses its "<".
        """
        lines = text.split("\n")
        if len(lines) == 1:
            # Single-line block such as "<TAG a b>"
            header = lines[0][1:]
            if header.endswith(ParserConstants.BLOCK_CLOSE):
                header = header[:-1]
            return header, []

        if lines[-1] == ParserConstants.BLOCK_CLOSE:
            lines.pop()
        return lines[0][1:], lines[1:]

    def tokenize_block(self, text: str, resolve: Callable[[int], RPPNode]) -> RPPNode:
        """
        Build a block node and its children.

        Args:
            text: Raw block text from the block table
            resolve: Callback building the node for a nested block index

        Returns:
            The block node, or an opaque node for binary-as-text tags
        """
        header, body = self.split_block(text)
        tag, params = self.split_params(header)

        if tag.upper() in ParserConstants.OPAQUE_TAGS:
            node = RPPNode(node_type=NodeType.OPAQUE, tag=tag, params=params,
                           payload=self.table.expand("".join(body)))
            self.index.append(node)
            return node

        node = RPPNode(node_type=NodeType.BLOCK, tag=tag, params=params)
        self.index.append(node)
        for line in body:
            nested = ref_index(line)
            if nested is not None:
                node.children.append(resolve(nested))
            else:
                node.children.append(self.tokenize_line(line))
        return node
