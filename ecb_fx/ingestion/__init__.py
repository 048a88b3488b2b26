"""Feed retrieval, validation and parsing for the ECB reference rates."""
