"""Init and add workflows for each supported language."""
