"""Living Chronicle: narrates a civilization simulation's event log as a chronicle."""
