"""
Asset Packager — живой индекс файлов и сборка архивов по запросу.

=== НАЗНАЧЕНИЕ ===
Сервис, который:
1. Держит в памяти индекс файлов отслеживаемой папки
2. Обновляет индекс по событиям файловой системы (watchdog)
3. Собирает tar.gz архив из запрошенного набора файлов
4. Добавляет в архив manifest (metadata.json) с успешными и неудачными путями

=== КОМПОНЕНТЫ ===
- AssetIndex — индекс "относительный путь → существует"
- PackageBuilder — потоковая сборка архива
- WatchdogEventSource — источник событий файловой системы
- create_app — FastAPI шлюз (POST /api/package)
"""

__version__ = "1.0.0"
