import os
import sys
import shutil
import tempfile
from pathlib import Path
from datetime import datetime

from fastapi import FastAPI, File, UploadFile, HTTPException, Query
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import KICH_THUOC_FILE_TOI_DA
from loi_tex import LoiTex
from phan_tich_cot import phan_tich_mau_cot
from xu_ly_bang import doc_cac_bang_word

# Khởi tạo FastAPI app
app = FastAPI(title="Word2LaTeX Column Template API", version="1.0.0")

# Cấu hình CORS - cho phép frontend truy cập (hỗ trợ nhiều port)
cors_allow_all = os.getenv('CORS_ALLOW_ALL', '0').strip() == '1'
cors_origins_raw = os.getenv('CORS_ORIGINS', '').strip()
cors_origins = [o.strip() for o in cors_origins_raw.split(',') if o.strip()]
if not cors_origins:
    cors_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:5173",
    ]

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if cors_allow_all else cors_origins,
    allow_credentials=False if cors_allow_all else True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def in_log_loi(thong_diep: str, loi: Exception = None):
    # In log lỗi ra console để developer dễ debug
    if loi is not None:
        print(f"[LOI] {thong_diep}: {loi}")
    else:
        print(f"[LOI] {thong_diep}")


def xoa_thu_muc_an_toan(duong_dan: Path):
    # Xóa thư mục an toàn và không làm crash server nếu lỗi
    try:
        if duong_dan.exists():
            shutil.rmtree(duong_dan, ignore_errors=True)
    except Exception as loi:
        in_log_loi(f"Không thể xóa thư mục: {duong_dan}", loi)


def phan_hoi_loi_tex(loi: LoiTex, **them) -> JSONResponse:
    # Lỗi cú pháp mẫu cột → 400 kèm mã lỗi
    noi_dung = {
        "thanh_cong": False,
        "ma_loi": loi.ma_loi,
        "error": loi.thong_diep,
    }
    noi_dung.update(them)
    return JSONResponse(status_code=400, content=noi_dung)


@app.get("/")
def doc_api():
    # Endpoint gốc - hướng dẫn sử dụng API
    return {
        "message": "Word2LaTeX Column Template API đang hoạt động",
        "endpoints": {
            "/api/phan-tich-cot": "GET ?mau=... - Phân tích mẫu cột array/tabular",
            "/api/phan-tich-bang-word": "POST - Upload file .docx, dựng và phân tích mẫu cột từng bảng",
            "/docs": "Xem Swagger documentation"
        }
    }


@app.get("/api/phan-tich-cot")
def phan_tich_cot(mau: str = Query(..., description="Mẫu cột, ví dụ |l|c|p{3cm}|")):
    # Phân tích một mẫu cột và trả thông tin cột
    try:
        mang = phan_tich_mau_cot(mau)
    except LoiTex as loi:
        in_log_loi(f"Mẫu cột không hợp lệ: {mau!r}", loi)
        return phan_hoi_loi_tex(loi, mau_cot=mau)

    return {
        "thanh_cong": True,
        "mau_cot": mau,
        "thong_tin": mang.to_dict(),
    }


@app.post("/api/phan-tich-bang-word")
async def phan_tich_bang_word(file: UploadFile = File(...)):
    # Upload file .docx, dựng mẫu cột cho từng bảng rồi phân tích

    if not file.filename.endswith('.docx'):
        raise HTTPException(
            status_code=400,
            detail="Chỉ chấp nhận file .docx"
        )

    contents = await file.read()
    if len(contents) > KICH_THUOC_FILE_TOI_DA:
        raise HTTPException(
            status_code=400,
            detail="File quá lớn. Kích thước tối đa 10MB"
        )

    print(f"[API] Nhận file Word: {file.filename} ({len(contents)} bytes)")

    thu_muc_tam = Path(tempfile.mkdtemp(prefix="colspec_"))
    try:
        input_path = thu_muc_tam / "input.docx"
        with open(input_path, "wb") as f:
            f.write(contents)

        danh_sach_bang = doc_cac_bang_word(str(input_path))
        print(f"[API] Đã phân tích {len(danh_sach_bang)} bảng: {file.filename}")

        return JSONResponse(status_code=200, content={
            "thanh_cong": True,
            "ten_file": file.filename,
            "so_bang": len(danh_sach_bang),
            "bang": danh_sach_bang,
        })
    except LoiTex as loi:
        in_log_loi(f"Mẫu cột sinh từ bảng Word không hợp lệ: {file.filename}", loi)
        return phan_hoi_loi_tex(loi, ten_file=file.filename)
    except Exception as loi:
        in_log_loi(f"Lỗi đọc file Word: {file.filename}", loi)
        thong_diep_loi = str(loi).strip() if str(loi) else "File Word không hợp lệ hoặc không thể xử lý"
        return JSONResponse(status_code=400, content={
            "thanh_cong": False,
            "error": f"Lỗi khi đọc file Word: {thong_diep_loi}",
        })
    finally:
        xoa_thu_muc_an_toan(thu_muc_tam)


@app.get("/health")
def kiem_tra_suc_khoe():
    # Health check endpoint
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }


if __name__ == "__main__":
    # Chạy server với uvicorn
    uvicorn.run(
        "main:app",
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', '8000')),
        reload=True  # Auto-reload khi code thay đổi (chỉ dùng development)
    )
