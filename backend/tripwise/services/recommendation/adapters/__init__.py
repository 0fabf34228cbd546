"""Domain adapters. Each module turns a profile into provider params and
ranks that provider's raw results against the same profile."""
