"""AI fitting room: try a garment photo on a personal photo via Gemini."""
