from editor_core.adapters.textual.app import main

raise SystemExit(main())
