import os

# UIテストをディスプレイなしで実行するため
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
