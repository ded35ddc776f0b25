"""Services around the performance core: data sources, dataset files, reporting."""
