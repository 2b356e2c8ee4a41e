from judging.reviews.models.review_model import Review
