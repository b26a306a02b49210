# e2e/travelblog_e2e/selectors/post_selectors.py
from travelblog_e2e.core.locators import by_class, by_name, by_text

# add_post.php / 編集画面
TITLE_INPUT = by_name("title")
IMAGE_URL_INPUT = by_name("image_url")
CONTENT_INPUT = by_name("content")

POST_BLOG_BUTTON = by_text("button", "Post Blog")
UPDATE_POST_BUTTON = by_text("button", "Update Post")

# index.php の投稿一覧
CARD = by_class("card")
LIST_CONTAINER = by_class("container")

# カード内の操作ボタン（カードの subtree 内で探す）
EDIT_ACTION_TEXT = "Edit"
DELETE_ACTION_TEXT = "Delete"
