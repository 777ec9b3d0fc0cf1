"""GrowMate tracker application: state layer and entry point."""
