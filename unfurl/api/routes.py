from fastapi import APIRouter, HTTPException, status
from unfurl.schemas import FetchRequest, FetchResult
from unfurl.services import fetch as fetch_service
from unfurl.fetch.errors import InvalidUrlError, LoadFailureError, MissingElementError

router = APIRouter()

@router.post("/fetch", response_model=FetchResult)
def fetch_url(request: FetchRequest):
    """
    Fetch a page and return its summary.

    Title, text excerpt, image URLs and resolved meta values
    (description, image, title, video...).
    """
    try:
        return fetch_service.fetch_page(request.url)
    except InvalidUrlError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except MissingElementError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except LoadFailureError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except Exception as e:
        print(f"ERROR fetching {request.url}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Page fetch failed: {str(e)}"
        )

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Unfurl"}
