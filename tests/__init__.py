"""
Тесты Asset Packager

- test_asset_index.py — обход папки, события, потокобезопасность
- test_watcher.py — перевод событий watchdog
- test_builder.py — формат архива и политика ошибок
- test_manifest.py — metadata.json
- test_api.py — HTTP шлюз
- test_main.py — запуск сервиса

См. conftest.py для fixtures.
"""
