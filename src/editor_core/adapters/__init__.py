"""Host adapters that connect the editor core to a terminal toolkit."""
