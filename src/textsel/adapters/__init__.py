"""Host integrations for textsel."""
