#!/usr/bin/env python3
"""
Biomarker Health Score Service — Main Entry Point
==================================================
Launches the FastAPI backend with Uvicorn.
Run with:  python main.py

⚠️  DISCLAIMER: The health score is a WELLNESS INDICATOR computed from a
    fixed rule table over already-measured biomarkers.  It is NOT a
    medical device and must not be used for clinical diagnosis or
    treatment decisions.
"""

import uvicorn
from api.app import create_app
from config import API_HOST, API_PORT

if __name__ == "__main__":
    app = create_app()
    uvicorn.run(
        app,
        host=API_HOST,
        port=API_PORT,
        reload=False,
        log_level="info",
    )
