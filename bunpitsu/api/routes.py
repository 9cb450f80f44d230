from fastapi import APIRouter, Body, Request
from fastapi.responses import FileResponse, HTMLResponse
import os
import logging
import traceback

from bunpitsu.modules.analyzer.components.handle import AnalysisFailed

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/")
async def index_page():
    base = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'static'))
    index = os.path.join(base, 'index.html')
    if os.path.exists(index):
        return FileResponse(index, media_type='text/html')
    html = """
    <html><body><h2>Index page not found</h2><p>Please ensure bunpitsu/static/index.html exists.</p></body></html>
    """
    return HTMLResponse(html)

@router.get("/api/health")
async def health_api(request: Request):
    splitter = getattr(request.app.state, "splitter", None)
    analyzer = getattr(request.app.state, "analyzer", None)
    return {
        "status": "success",
        "splitter": splitter.name if splitter is not None else None,
        "analyzer": analyzer.name if analyzer is not None else None,
        "analyzer_ready": analyzer.initialized if analyzer is not None else False,
    }

@router.post("/api/bunsetu")
async def bunsetu_api(request: Request, text: str = Body(..., embed=True)):
    """
    文節分割 API

    リクエスト:
    {"text": "猫が走る。"}

    レスポンス:
    {"status": "success", "phrases": ["猫が", "走る", "。"]}
    """
    logger.info(f"[Bunsetu API] Received text ({len(text)} chars)")
    try:
        from bunpitsu.modules.bunsetu.service.bunsetu_service import segment_bunsetu_service
        phrases = await segment_bunsetu_service(text, request)
        logger.info(f"[Bunsetu API] {len(phrases)} phrases")
        return {
            "status": "success",
            "phrases": phrases
        }

    except AnalysisFailed as e:
        logger.error(f"[Bunsetu API] Analysis failed: {e}")
        return {
            "status": "error",
            "message": str(e),
            "phrases": []
        }
    except Exception as e:
        logger.error(f"[Bunsetu API] Error: {str(e)}")
        logger.error(traceback.format_exc())
        return {
            "status": "error",
            "message": str(e),
            "phrases": []
        }

@router.post("/api/analyze")
async def analyze_api(request: Request, text: str = Body(..., embed=True)):
    """
    形態素ごとの品詞情報

    レスポンス:
    {
      "status": "success",
      "words": [{"surface": "猫", "pos": "名詞", "pos_detail": "一般", "pronunciation": "ネコ"}, ...]
    }
    """
    try:
        from bunpitsu.modules.stats.service.stats_service import analyze_words_service
        words = await analyze_words_service(text, request)
        return {
            "status": "success",
            "words": [w.to_dict() for w in words]
        }

    except AnalysisFailed as e:
        logger.error(f"[Analyze API] Analysis failed: {e}")
        return {
            "status": "error",
            "message": str(e),
            "words": []
        }
    except Exception as e:
        logger.error(f"[Analyze API] Error: {str(e)}")
        logger.error(traceback.format_exc())
        return {
            "status": "error",
            "message": str(e),
            "words": []
        }

@router.post("/api/stats")
async def stats_api(request: Request, text: str = Body(..., embed=True)):
    try:
        from bunpitsu.modules.stats.service.stats_service import text_stats_service
        stats = await text_stats_service(text, request)
        return {
            "status": "success",
            "stats": stats.to_dict()
        }

    except AnalysisFailed as e:
        logger.error(f"[Stats API] Analysis failed: {e}")
        return {
            "status": "error",
            "message": str(e),
            "stats": {}
        }
    except Exception as e:
        logger.error(f"[Stats API] Error: {str(e)}")
        logger.error(traceback.format_exc())
        return {
            "status": "error",
            "message": str(e),
            "stats": {}
        }
