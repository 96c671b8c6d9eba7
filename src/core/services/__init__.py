"""Services: extraction, synthesis, post-processing and orchestration."""
