import logging

from bson import ObjectId

from Models.postModel import Post

logger = logging.getLogger(__name__)


class MongoPostStore:
    """Document store for posts backed by mongoengine.

    Every call goes to MongoDB; nothing is cached between requests.
    """

    def create(self, **fields):
        post = Post(**fields)
        post.save()
        return post

    def find(self, post_filter):
        query = post_filter.to_query()
        logger.debug(f"Post query: {query}")
        return Post.objects(**query).order_by('-created_at')

    def find_by_id(self, post_id):
        if not post_id or not ObjectId.is_valid(str(post_id)):
            return None
        return Post.objects(id=post_id).first()

    def save(self, post):
        post.save()
        return post

    def delete_one(self, post):
        post.delete()
