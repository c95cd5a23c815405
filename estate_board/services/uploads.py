"""
Приём данных формы объявления: текстовые поля, файлы фотографий и список
удаляемых фото. Понимает multipart/form-data, urlencoded-формы и JSON.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from fastapi import Request
from starlette.datastructures import UploadFile

from estate_board.errors import PayloadTooLarge, ValidationError

logger = logging.getLogger(__name__)

IMAGES_FIELD = "images"
REMOVE_IMAGES_FIELD = "remove_images"
DEFAULT_MIME = "application/octet-stream"
MAX_MIME_LENGTH = 255


@dataclass
class UploadedImage:
    """Принятый файл до передачи в хранилище"""
    filename: str
    mime: str
    data: bytes


@dataclass
class Submission:
    """Разобранный запрос на создание/обновление объявления"""
    fields: Dict[str, Any] = field(default_factory=dict)
    images: List[UploadedImage] = field(default_factory=list)
    remove_images: List[int] = field(default_factory=list)


def parse_image_ids(values: List[Any]) -> List[int]:
    """
    Приводит remove_images к списку id.

    Каждое значение может быть JSON-массивом ("[1, 2]"), отдельным числом
    или уже разобранным списком из JSON-тела.
    """
    ids: List[int] = []
    for value in values:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
            try:
                value = json.loads(value)
            except json.JSONDecodeError:
                raise ValidationError("remove_images must be a JSON array of image ids")
        items = value if isinstance(value, list) else [value]
        for item in items:
            if isinstance(item, bool) or not isinstance(item, int):
                raise ValidationError("remove_images must be a JSON array of image ids")
            ids.append(item)
    return ids


def _drop_blank(fields: Dict[str, Any]) -> Dict[str, Any]:
    # Пустые поля формы считаются отсутствующими
    return {
        key: value for key, value in fields.items()
        if value is not None and not (isinstance(value, str) and not value.strip())
    }


async def _read_json(request: Request) -> Submission:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError("Request body is not valid JSON")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    remove = body.pop(REMOVE_IMAGES_FIELD, None)
    body.pop(IMAGES_FIELD, None)
    return Submission(
        fields=_drop_blank(body),
        remove_images=parse_image_ids([remove]) if remove is not None else [],
    )


async def _read_upload(upload: UploadFile, max_file_size: int) -> UploadedImage:
    data = await upload.read(max_file_size + 1)
    if len(data) > max_file_size:
        logger.info(f"Rejected upload {upload.filename!r}: larger than {max_file_size} bytes")
        raise PayloadTooLarge(f"File {upload.filename!r} exceeds {max_file_size} bytes")
    mime = upload.content_type or DEFAULT_MIME
    if len(mime) > MAX_MIME_LENGTH:
        raise ValidationError(f"Content type of {upload.filename!r} is longer than {MAX_MIME_LENGTH} characters")
    return UploadedImage(
        filename=upload.filename or "",
        mime=mime,
        data=data,
    )


async def read_submission(request: Request, max_file_size: int, max_files: int) -> Submission:
    """Читает тело запроса и проверяет лимиты на размер и количество файлов"""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        return await _read_json(request)

    submission = Submission()
    remove_values: List[str] = []
    async with request.form() as form:
        uploads = []
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                # Пустая часть - браузер отправил форму без выбранного файла
                if key == IMAGES_FIELD and (value.filename or value.size):
                    uploads.append(value)
            elif key == REMOVE_IMAGES_FIELD:
                remove_values.append(value)
            else:
                submission.fields[key] = value

        if len(uploads) > max_files:
            raise PayloadTooLarge(f"At most {max_files} files per request")

        for upload in uploads:
            image = await _read_upload(upload, max_file_size)
            if image.data:
                submission.images.append(image)

    submission.fields = _drop_blank(submission.fields)
    submission.remove_images = parse_image_ids(remove_values)
    return submission
