from tagscript.cli import main

raise SystemExit(main())
