"""Network tools for cdnseo."""
