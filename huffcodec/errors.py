class HuffmanError(ValueError):
    pass

class EmptyQueueError(HuffmanError):
    # only reachable through a tree-building bug
    pass

class UnknownSymbolError(HuffmanError):
    def __init__(self, symbol):
        super().__init__(f"Unknown symbol {symbol!r}: no code in table")
        self.symbol = symbol

class MalformedBitstreamError(HuffmanError):
    pass

class InvalidTreeError(HuffmanError):
    pass
