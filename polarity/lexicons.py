from __future__ import annotations

# Marker tables. Order is kept stable; entries are matched as written.

KO_POSITIVE: tuple[str, ...] = (
    "좋다",
    "좋은",
    "좋습니다",
    "기분좋다",
    "기쁘다",
    "행복하다",
    "행복한",
    "훌륭하다",
    "멋지다",
    "완벽하다",
    "최고다",
    "사랑한다",
    "좋아한다",
    "감사하다",
    "만족하다",
    "성공적이다",
    "흥미롭다",
    "재미있다",
    "놀라운",
    "탁월한",
    "우수한",
    "효과적인",
    "편리한",
)

KO_NEGATIVE: tuple[str, ...] = (
    "싫다",
    "싫은",
    "나쁘다",
    "나쁜",
    "실망스럽다",
    "실망",
    "화나다",
    "화가",
    "슬프다",
    "슬픈",
    "짜증나다",
    "문제가",
    "오류가",
    "실패",
    "최악",
    "별로",
    "비싸다",
    "어렵다",
    "복잡하다",
    "불편하다",
    "불만",
    "후회",
    "걱정",
    "스트레스",
    "피곤하다",
)

# English markers are lower-case; input is lower-cased before matching.
EN_POSITIVE: tuple[str, ...] = (
    "good",
    "great",
    "excellent",
    "amazing",
    "wonderful",
    "fantastic",
    "love",
    "like",
    "happy",
    "pleased",
    "satisfied",
    "perfect",
    "awesome",
    "brilliant",
    "outstanding",
    "impressive",
    "effective",
    "convenient",
    "useful",
    "helpful",
)

EN_NEGATIVE: tuple[str, ...] = (
    "bad",
    "terrible",
    "horrible",
    "awful",
    "disappointing",
    "sad",
    "angry",
    "hate",
    "dislike",
    "frustrated",
    "annoyed",
    "problem",
    "issue",
    "error",
    "failed",
    "worst",
    "expensive",
    "difficult",
    "complicated",
    "inconvenient",
    "useless",
)
