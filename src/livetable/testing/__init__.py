"""Testing – property-based strategies for table state (``livetable[test]``)."""
