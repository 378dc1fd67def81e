from .codec_core import Coder, build_coder, compress, decompress, read_message, write_message
from .errors import (
    EmptyQueueError,
    HuffmanError,
    InvalidTreeError,
    MalformedBitstreamError,
    UnknownSymbolError,
)
from .huffman import Node, build_codebook, build_tree, frequency_table, is_prefix_free
from .pqueue import PriorityQueue

__version__ = "0.1.0"
