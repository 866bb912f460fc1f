"""Language Strings - centralized locale-specific text for forms, alerts and pages.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Every key exists in every Locale catalog
    - Unknown keys raise KeyError (typos fail loudly in tests)

Design Decisions:
    - One flat key space shared by validation, alerts and page states
    - Japanese catalog keeps the wording the Japanese-language site already uses
"""

from inkwell.core.domain_types import Locale


_STRINGS: dict[Locale, dict[str, str]] = {
    Locale.EN: {
        # --- validation ---
        "category.name.required": "Category name is required.",
        "category.name.too_long": "Category name must be 50 characters or fewer.",
        "post.title.required": "Title is required.",
        "post.title.too_long": "Title must be 50 characters or fewer.",
        "post.content.required": "Content is required.",
        "post.content.too_long": "Content must be 1000 characters or fewer.",
        "post.thumbnail_url.required": "Thumbnail URL is required.",
        "post.thumbnail_url.invalid": "Enter a valid URL.",
        "post.thumbnail_key.required": "Thumbnail image is required.",
        "post.categories.required": "Select at least one category.",
        "contact.name.required": "Name is required.",
        "contact.name.too_long": "Name must be 30 characters or fewer.",
        "contact.email.required": "Email address is required.",
        "contact.email.invalid": "Enter a valid email address.",
        "contact.message.required": "Message is required.",
        "contact.message.too_long": "Message must be 500 characters or fewer.",
        "signup.email.required": "Email address is required.",
        "signup.email.invalid": "Enter the email address in a valid format.",
        "signup.password.too_short": "Password must be at least 8 characters.",
        # --- alerts ---
        "alert.post.created": "Post created.",
        "alert.post.updated": "Post updated.",
        "alert.post.deleted": "Post deleted.",
        "alert.category.created": "Category created.",
        "alert.category.updated": "Category updated.",
        "alert.category.deleted": "Category deleted.",
        "alert.create.failed": "Failed to create. {detail}",
        "alert.update.failed": "Failed to update. {detail}",
        "alert.delete.failed": "Failed to delete. {detail}",
        "alert.retry": "Please try again.",
        "alert.status": "Error: {status}",
        "alert.confirm_delete": "Are you sure you want to delete this?",
        "alert.upload.failed": "Failed to upload the image: {detail}",
        "upload.storage.missing": "Image storage is not configured.",
        "alert.auth.required": "Authentication is required.",
        "alert.contact.sent": "Your message has been sent.",
        "alert.contact.failed": "Failed to send. {detail}",
        "alert.signup.sent": "A confirmation email has been sent.",
        "alert.signup.failed": "Sign-up failed.",
        # --- page states ---
        "page.loading": "Loading...",
        "page.error": "An error occurred: {detail}",
        "page.posts.empty": "No posts found.",
        "page.post.not_found": "Post not found.",
        "page.categories.empty": "No categories found.",
    },
    Locale.JA: {
        "category.name.required": "カテゴリーを入力してください。",
        "category.name.too_long": "カテゴリーは50文字以内で入力してください。",
        "post.title.required": "タイトルは必須です。",
        "post.title.too_long": "タイトルは50文字以内で入力してください。",
        "post.content.required": "内容は必須です。",
        "post.content.too_long": "内容は1000文字以内で入力してください。",
        "post.thumbnail_url.required": "サムネイルURLは必須です。",
        "post.thumbnail_url.invalid": "有効なURLを入力してください。",
        "post.thumbnail_key.required": "サムネイル画像は必須です。",
        "post.categories.required": "カテゴリーを1つ以上選択してください。",
        "contact.name.required": "お名前は必須です。",
        "contact.name.too_long": "お名前は30文字以内で入力してください。",
        "contact.email.required": "メールアドレスは必須です。",
        "contact.email.invalid": "有効なメールアドレスを入力してください。",
        "contact.message.required": "本文は必須です。",
        "contact.message.too_long": "本文は500文字以内で入力してください。",
        "signup.email.required": "メールアドレスは必須です",
        "signup.email.invalid": "メールアドレスの形式で入力してください",
        "signup.password.too_short": "パスワードは8文字以上で入力してください",
        "alert.post.created": "記事を作成しました",
        "alert.post.updated": "記事を更新しました",
        "alert.post.deleted": "記事を削除しました",
        "alert.category.created": "カテゴリーを新規作成しました",
        "alert.category.updated": "カテゴリーを更新しました",
        "alert.category.deleted": "カテゴリーを削除しました",
        "alert.create.failed": "作成に失敗しました。{detail}",
        "alert.update.failed": "更新に失敗しました。{detail}",
        "alert.delete.failed": "削除に失敗しました。{detail}",
        "alert.retry": "もう一度お試しください。",
        "alert.status": "エラー: {status}",
        "alert.confirm_delete": "本当に削除しますか？",
        "alert.upload.failed": "画像のアップロードに失敗しました: {detail}",
        "upload.storage.missing": "画像ストレージが設定されていません。",
        "alert.auth.required": "認証が必要です",
        "alert.contact.sent": "送信しました",
        "alert.contact.failed": "送信に失敗しました。{detail}",
        "alert.signup.sent": "確認メールを送信しました。",
        "alert.signup.failed": "登録に失敗しました",
        "page.loading": "読み込み中...",
        "page.error": "エラーが発生しました: {detail}",
        "page.posts.empty": "投稿がみつかりませんでした",
        "page.post.not_found": "投稿がみつかりませんでした",
        "page.categories.empty": "カテゴリーがみつかりませんでした",
    },
}


def get_string(key: str, locale: Locale = Locale.EN, **fmt: object) -> str:
    """Look up a catalog string and apply str.format() placeholders."""
    text = _STRINGS[locale][key]
    return text.format(**fmt) if fmt else text
