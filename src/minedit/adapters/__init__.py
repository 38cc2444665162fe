"""Terminal hosts that drive the editor."""
