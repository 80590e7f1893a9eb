"""
Serverless entry point (AWS Lambda / Vercel Python runtime).

Local development: uvicorn api.index:app --reload
"""
from mangum import Mangum

from app.main import create_app

app = create_app()

handler = Mangum(app, lifespan="off")
