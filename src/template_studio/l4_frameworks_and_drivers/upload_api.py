"""HTTP surface: asset-library upload route (FastAPI)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from template_studio import __version__
from template_studio.l1_entities.asset import UploadFile as DeclaredFile
from template_studio.l1_entities.errors import UploadRejectedError
from template_studio.l2_use_cases.upload_asset_use_case import UploadAssetUseCase
from template_studio.l4_frameworks_and_drivers.container import DependencyContainer

log = logging.getLogger('ts.upload')

router = APIRouter(prefix='/api/asset-library', tags=['asset-library'])


@router.post('/upload', summary='Upload an asset to the user library')
async def upload_asset(
    request: Request,
    file: UploadFile | None = File(None),
    type: str | None = Form(None),  # noqa: A002 -- form field name is part of the contract
    userId: str | None = Form(None),  # noqa: N803 -- form field name is part of the contract
) -> JSONResponse:
    if file is None or not file.filename or not type or not userId:
        return JSONResponse(status_code=400, content={'error': 'Missing required fields: file, type, userId'})

    use_case: UploadAssetUseCase = request.app.state.container.upload_uc
    try:
        # never buffer more than one byte past the limit; that byte is enough to reject
        content = await file.read(use_case.size_limit + 1)
        declared = DeclaredFile(
            name=file.filename,
            mime_type=file.content_type or 'application/octet-stream',
            size=max(len(content), file.size or 0),
        )
        asset = await use_case.execute(declared, content, type, userId)
    except UploadRejectedError as e:
        return JSONResponse(status_code=400, content={'error': str(e)})
    except Exception:
        log.exception('Asset upload failed for user %s', userId)
        return JSONResponse(status_code=500, content={'error': 'Failed to upload asset'})
    finally:
        await file.close()

    return JSONResponse(
        content={
            'success': True,
            'asset': asset.model_dump(mode='json'),
            'message': 'Asset uploaded successfully',
        }
    )


def create_app(container: DependencyContainer) -> FastAPI:
    app = FastAPI(title='template-studio', version=__version__)
    app.state.container = container
    app.include_router(router)
    return app
