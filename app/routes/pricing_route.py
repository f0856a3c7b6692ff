from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.services.pricing_crud import pricing_crud
from app.schemas.pricing_schema import (
    PricingItemCreate,
    PricingItemUpdate,
    PricingItemResponse,
    PricingItemList,
    PricingItemCreatedResponse,
)
from app.schemas.user_schema import TokenClaims, MessageResponse
from app.database import get_db
from app.security.auth import get_current_admin
from app.logger import get_logger

pricing_router = APIRouter()
logger = get_logger(__name__)

# PUBLIC ENDPOINTS - anyone can browse the catalog


@pricing_router.get("/pricing", response_model=PricingItemList, status_code=status.HTTP_200_OK)
def get_pricing_items(db: Session = Depends(get_db)):
    try:
        items = pricing_crud.get_items(db)
        return PricingItemList(items=[PricingItemResponse.model_validate(item) for item in items])

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching pricing items: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


# ADMIN ENDPOINTS - catalog management


@pricing_router.post(
    "/pricing", response_model=PricingItemCreatedResponse, status_code=status.HTTP_201_CREATED
)
def create_pricing_item(
    item: PricingItemCreate,
    admin: TokenClaims = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Add a pricing item (admin only)"""
    try:
        logger.info(f"Admin {admin.subject_id} creating pricing item: {item.name}")
        db_item = pricing_crud.create_item(db, item)
        return PricingItemCreatedResponse(itemId=db_item.id)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating pricing item: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@pricing_router.put(
    "/pricing/{item_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
def update_pricing_item(
    item_id: int,
    item_update: PricingItemUpdate,
    admin: TokenClaims = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Update a pricing item (admin only)"""
    try:
        logger.info(f"Admin {admin.subject_id} updating pricing item: {item_id}")
        pricing_crud.update_item(db, item_id, item_update)
        return MessageResponse(message="Pricing item updated")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating pricing item {item_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@pricing_router.delete(
    "/pricing/{item_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
def delete_pricing_item(
    item_id: int,
    admin: TokenClaims = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Delete a pricing item (admin only)"""
    try:
        logger.info(f"Admin {admin.subject_id} deleting pricing item: {item_id}")
        pricing_crud.delete_item(db, item_id)
        return MessageResponse(message="Pricing item deleted")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting pricing item {item_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )
