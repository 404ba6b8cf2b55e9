from datetime import date

from fastapi import APIRouter

from config.settings import settings

router = APIRouter(prefix="/config", tags=["설정"])

# ==========================================================
# [1단계] 현재 학년도 계산 함수
# ==========================================================
def get_current_academic_year(today: date = None) -> str:
    """
    현재 날짜를 기준으로 학년도 계산 (9월 개학)
    - 9~12월 → "올해-내년"
    - 1~8월  → "작년-올해"
    """
    today = today or date.today()
    start = today.year if today.month >= 9 else today.year - 1
    return f"{start}-{start + 1}"


# ==========================================================
# [2단계] Config 라우터
# ==========================================================

# ✅ [READ] 학년도 · 평가 기간 · 합격 기준
@router.get("/academic")
def get_academic_config():
    academic_year = get_current_academic_year()
    return {
        "success": True,
        "data": {
            "academic_year": academic_year,
            "periods": settings.DEFAULT_PERIODS,
            "pass_mark": settings.PASS_MARK,
        },
        "message": f"{academic_year} 학년도 기준 설정 반환"
    }
