from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
import logging

import docxfield

logger = logging.getLogger('docxfield')

app = FastAPI(title="HTML to WordprocessingML Converter API")

# Enable CORS for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# List numbering ids are unique for the lifetime of the process;
# definitions are not kept between requests
numbering = docxfield.NumberingRegistry(record=False)


@app.post("/convert")
@app.post("/api/convert") # Support both paths
async def convert_field(
    text: str = Form(None),
    file: UploadFile = File(None),
    source_format: str = Form("html", alias="format"),
):
    if not text and not file:
        raise HTTPException(status_code=400, detail="No content provided")

    if source_format not in ("html", "markdown"):
        raise HTTPException(status_code=400, detail=f"Unsupported format: {source_format}")

    content = ""
    if text:
        content = text
    else:
        try:
            content = (await file.read()).decode("utf-8")
        except UnicodeDecodeError:
            raise HTTPException(status_code=400, detail="File is not valid UTF-8")

    try:
        if source_format == "markdown":
            xml = docxfield.convert_markdown_string(content, numbering=numbering)
        else:
            xml = docxfield.convert_string(content, numbering=numbering)
    except docxfield.DocxFieldError as e:
        logger.warning("Conversion rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return Response(content=xml, media_type="application/xml")


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
