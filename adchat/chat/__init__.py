"""Chat reply pipeline: input resolution, prompt assembly, upstream call, sanitization."""
