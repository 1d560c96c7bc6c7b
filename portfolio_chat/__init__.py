# Portfolio chat proxy: answers questions about one professional profile via Gemini.

__version__ = "1.0.0"
