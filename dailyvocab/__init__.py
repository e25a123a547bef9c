"""dailyvocab: daily vocabulary submission and review backend."""
