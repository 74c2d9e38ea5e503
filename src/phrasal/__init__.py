"""phrasal: segment text into phrases and translate them with a local LLM."""
