"""User-facing messages (Japanese, matching the display language)."""

EMPTY_URL = "URLを入力してください"
INVALID_URL = "有効なYouTube URLを入力してください"
VIDEO_ID_NOT_FOUND = "動画IDを取得できませんでした"

NO_CAPTIONS = "この動画には字幕がありません"
EXTRACTION_FAILED = "字幕テキストの抽出に失敗しました"

FILESYSTEM_ERROR = "ファイルシステムエラーが発生しました。キャッシュ設定を確認してください。"
ACCESS_BLOCKED = "YouTubeによるアクセス制限が発生しました。しばらくしてからお試しください。"
TIMEOUT = (
    "タイムアウトが発生しました。動画が長い場合、時間がかかることがあります。"
    "しばらくしてからお試しください。"
)
NETWORK_ERROR = "ネットワークエラーが発生しました。インターネット接続を確認してください。"
CAPTIONS_INVALID = "この動画には字幕がありません。字幕が有効な動画を試してください。"
VIDEO_UNAVAILABLE = "この動画は利用できません"
GENERIC_ERROR = "エラーが発生しました: {detail}"
UNKNOWN_ERROR = "字幕の取得中にエラーが発生しました。しばらくしてからお試しください。"

UNKNOWN_TITLE = "タイトル不明"
UNKNOWN_CHANNEL = "チャンネル不明"
