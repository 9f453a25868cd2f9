"""Command line programs, one per AWS operation plus the scenario runner."""
