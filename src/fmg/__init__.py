"""Fantasy Mage Game: a turn-based text combat simulator."""
