from fastapi import FastAPI
from matrix_exporter.api.export import router as export_router

app = FastAPI(
    title="OSADL Matrix Exporter",
    version="1.0.0",
)

# API principali
app.include_router(export_router, prefix="/api", tags=["Export"])

# per test rapido
@app.get("/")
def root():
    return {"message": "Matrix Exporter is running"}
