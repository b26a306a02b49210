# e2e/travelblog_e2e/selectors/auth_selectors.py
from travelblog_e2e.core.locators import by_class, by_name, by_text

# フォーム（signup.php / login.php 共通の name 属性）
EMAIL_INPUT = by_name("email")
PASSWORD_INPUT = by_name("password")

SIGNUP_BUTTON = by_text("button", "Sign Up")
LOGIN_BUTTON = by_text("button", "Login")

# ヘッダーのログアウトは <a>
LOGOUT_LINK = by_text("a", "Logout")

# ログイン失敗時のメッセージ
ERROR_MESSAGE = by_class("error")
INVALID_CREDENTIALS_TEXT = "Invalid credentials"

# ページ目印
LOGIN_PAGE_MARKER = "Login"
HOME_PAGE_MARKER = "My Traveling Blog"
