"""Kill-feed reconstruction and MVP scoring engine."""
