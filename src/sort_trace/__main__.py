from sort_trace.cli import main

raise SystemExit(main())
