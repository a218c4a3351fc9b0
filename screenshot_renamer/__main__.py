from screenshot_renamer.cli import main

raise SystemExit(main())
