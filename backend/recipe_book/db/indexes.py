# recipe_book/db/indexes.py
# 컬렉션 인덱스 생성
# 앱 스타트업에서 한 번 ensure_indexes(db)를 await로 호출한다.

from motor.motor_asyncio import AsyncIOMotorDatabase

async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    # 참조 컬렉션은 이름 완전일치로만 조회
    await db["cuisines"].create_index("name")
    await db["tags"].create_index("name")

    await db["users"].create_index("email")

    # 목록 필터/리뷰 매칭용
    recipes = db["recipes"]
    await recipes.create_index("name")
    await recipes.create_index("cuisine.name")
    await recipes.create_index("tags.name")
    await recipes.create_index("ingredients.name")
    await recipes.create_index("reviews.reviewId")
